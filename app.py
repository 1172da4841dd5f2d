"""
主程序：随机魔方 + 单层 f = g + h 选步演示
按 N 走一步；--headless 时不开窗口，直接连续走 --steps 步
"""
import argparse
import time
from typing import Optional

import numpy as np

from src.core.config import load_config, CONFIG_PATH
from src.core.heuristic import h, heuristic_all_faces
from src.cube_state import CubeState
from src.solver_wrap import Solver, move_to_text


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """One generator for the whole process: cube construction and tie-breaks."""
    return np.random.default_rng(seed)


def viewer_options(cfg: dict) -> dict:
    """Viewer keyword arguments from a config already merged with the defaults."""
    win, view, hud = cfg['window'], cfg['view'], cfg['hud']
    return {
        'win_name': win['name'],
        'width': int(win['width']),
        'height': int(win['height']),
        'rot_x': float(view['rot_x']),
        'rot_y': float(view['rot_y']),
        'sensitivity': float(view['drag_sensitivity']),
        'cube_size': int(hud['cube_size']),
        'net_scale': float(hud['net_scale']),
        'show_labels': bool(hud['show_labels']),
    }


class App:
    def __init__(self, cfg: dict, headless: bool = False):
        self.cfg = cfg
        self.rng = make_rng(cfg.get('seed'))
        self.cube = CubeState(self.rng)
        self.solver = Solver(self.rng)
        self.headless = headless
        self.viewer = None
        if not headless:
            from src.viewer import Viewer
            self.viewer = Viewer(**viewer_options(cfg))
        print(f"🎲 初始魔方: {self.cube.build_state_string()}")
        print(f"   h={h(self.cube.cube)}, diag={heuristic_all_faces(self.cube.cube)}, counts ok={self.cube.is_counts_valid()}")

    def step(self):
        record = self.solver.step(self.cube)
        print(Solver.describe(record))
        return record

    def reset(self):
        self.cube.reset()
        self.solver.reset()
        print(f"🔄 新魔方: {self.cube.build_state_string()}")

    def run_headless(self, steps: int):
        for _ in range(steps):
            self.step()
        print(self.solver.summary(self.cube))

    def run(self):
        print("=" * 60)
        print("Rubik Cube + one-ply f = g + h")
        print("按 N 走一步，按 R 换新魔方，拖动旋转视角，ESC 退出")
        print("=" * 60)
        fps = int(self.cfg['window']['fps'])
        delay_ms = max(1, 1000 // max(1, fps))
        status = ""

        while not self.viewer.quit_requested:
            t0 = time.time()
            if self.viewer.step_requested:
                record = self.step()
                status = f"{record.move.notation}: {move_to_text(record.move)}"
                self.viewer.step_requested = False
            if self.viewer.reset_requested:
                self.reset()
                status = ""
                self.viewer.reset_requested = False

            img = self.viewer.render(self.cube, status)
            spent = int((time.time() - t0) * 1000)
            self.viewer.show(img, max(1, delay_ms - spent))

        self.viewer.close()
        print(self.solver.summary(self.cube))
        print("\n程序结束")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Random cube + one-ply greedy move selector")
    parser.add_argument("--config", default=CONFIG_PATH, help="YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="override the config seed")
    parser.add_argument("--headless", action="store_true", help="no window, run --steps plies")
    parser.add_argument("--steps", type=int, default=None, help="plies in headless mode")
    parser.add_argument("--moves", default="", help="sequence applied to the random cube first, e.g. \"U R' F2\"")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    cfg = load_config(args.config)
    if args.seed is not None:
        cfg['seed'] = args.seed
    app = App(cfg, headless=args.headless)
    if args.moves:
        applied = app.cube.scramble(args.moves)
        print(f"Applied {len(applied)} moves: {args.moves}")
    if args.headless:
        steps = args.steps if args.steps is not None else int(cfg['headless']['steps'])
        app.run_headless(steps)
    else:
        app.run()
    return app


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n用户中断")
    except Exception as e:
        print(f"错误: {e}")
        import traceback
        traceback.print_exc()
