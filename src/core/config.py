"""
配置文件：默认参数（config.yaml 中同名项会覆盖）
"""
import os
from typing import Any, Dict, Optional

import yaml

CONFIG_PATH = "config.yaml"

# 随机种子；None = 启动时从系统熵源取一次
SEED = None

# 窗口
WINDOW_NAME = "Rubik Cube + A*"
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 700
TARGET_FPS = 30

# 视角（度），鼠标左键拖动旋转
ROT_X = 25.0
ROT_Y = -35.0
DRAG_SENSITIVITY = 0.4

# HUD
CUBE_SIZE = 420
NET_SCALE = 0.34
SHOW_LABELS = False

# 无窗口模式默认步数
HEADLESS_STEPS = 20


def default_config() -> Dict[str, Any]:
    return {
        'seed': SEED,
        'window': {'name': WINDOW_NAME, 'width': WINDOW_WIDTH, 'height': WINDOW_HEIGHT, 'fps': TARGET_FPS},
        'view': {'rot_x': ROT_X, 'rot_y': ROT_Y, 'drag_sensitivity': DRAG_SENSITIVITY},
        'hud': {'cube_size': CUBE_SIZE, 'net_scale': NET_SCALE, 'show_labels': SHOW_LABELS},
        'headless': {'steps': HEADLESS_STEPS},
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: Optional[str] = CONFIG_PATH) -> Dict[str, Any]:
    """
    读取 YAML 配置并与默认值合并
    文件不存在或为空时返回默认值
    """
    cfg = default_config()
    if not path or not os.path.exists(path):
        return cfg
    with open(path, "r") as f:
        user_cfg = yaml.safe_load(f) or {}
    if not isinstance(user_cfg, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return _merge(cfg, user_cfg)
