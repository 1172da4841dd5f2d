import cv2
import numpy as np
from typing import Tuple

from .core import config
from .core.mini_cube_hud import MiniCubeHUD
from .core.net_hud import NetHUD
from .cube_state import CubeState


class Viewer:
    """
    OpenCV window around the cube renderers.
    - Left drag: rotate the 3D view.
    - N: request one solver step (serviced by the outer loop).
    - R: new random cube.
    - Q/ESC: quit.
    """

    def __init__(self, win_name: str = config.WINDOW_NAME,
                 width: int = config.WINDOW_WIDTH, height: int = config.WINDOW_HEIGHT,
                 rot_x: float = config.ROT_X, rot_y: float = config.ROT_Y,
                 sensitivity: float = config.DRAG_SENSITIVITY, cube_size: int = config.CUBE_SIZE,
                 net_scale: float = config.NET_SCALE, show_labels: bool = config.SHOW_LABELS,
                 create_window: bool = True):
        self.win = win_name
        self.width = int(width)
        self.height = int(height)
        self.rot_x = float(rot_x)
        self.rot_y = float(rot_y)
        self.sensitivity = float(sensitivity)
        self.cube_hud = MiniCubeHUD(size=min(int(cube_size), self.width, self.height))
        self.net_hud = NetHUD(label=show_labels)
        self.net_scale = float(net_scale)

        self.dragging = False
        self.last_xy: Tuple[int, int] = (0, 0)
        self.step_requested = False
        self.reset_requested = False
        self.quit_requested = False

        if create_window:
            cv2.namedWindow(self.win, cv2.WINDOW_AUTOSIZE)
            cv2.setMouseCallback(self.win, self._on_mouse)

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.dragging = True
        elif event == cv2.EVENT_LBUTTONUP:
            self.dragging = False
        elif event == cv2.EVENT_MOUSEMOVE and self.dragging:
            lx, ly = self.last_xy
            self.rot_y += (x - lx) * self.sensitivity
            self.rot_x += (y - ly) * self.sensitivity
        self.last_xy = (x, y)

    def handle_key(self, key: int):
        if key in (ord('n'), ord('N')):
            self.step_requested = True
            print("N pressed")
        elif key in (ord('r'), ord('R')):
            self.reset_requested = True
        elif key in (ord('q'), ord('Q'), 27):
            self.quit_requested = True

    def render(self, state: CubeState, status: str = "") -> np.ndarray:
        img = np.zeros((self.height, self.width, 3), np.uint8)
        img[:] = (24, 24, 24)
        size = self.cube_hud.size
        origin = (max(0, (self.width - size) // 4), max(0, (self.height - size) // 2))
        self.cube_hud.render(img, state, self.rot_x, self.rot_y, origin=origin)
        self.net_hud.render(img, state, scale=self.net_scale)

        info = f"g={state.cost}"
        if status:
            info = f"{status} | {info}"
        cv2.putText(img, info, (20, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 255, 0), 2, cv2.LINE_AA)
        tip = "[N] step  [R] new cube  [drag] rotate  [Q/ESC] quit"
        cv2.putText(img, tip, (20, self.height - 12), cv2.FONT_HERSHEY_SIMPLEX, 0.45, (200, 200, 200), 1, cv2.LINE_AA)
        return img

    def show(self, img: np.ndarray, delay_ms: int = 1):
        cv2.imshow(self.win, img)
        key = cv2.waitKey(delay_ms) & 0xFF
        if key != 0xFF:
            self.handle_key(key)

    def close(self):
        cv2.destroyWindow(self.win)
