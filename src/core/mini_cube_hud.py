"""
3D 魔方渲染器
按视角 (rot_x, rot_y) 把 54 个贴纸投影到画布上，鼠标拖动改变视角
"""
import cv2
import numpy as np
from typing import Dict, Optional, Tuple

from .cube import COLOR_TO_BGR, FACE_LETTERS, Face


# 物体坐标：y 朝上，z 朝向观察者（前面）；魔方边长 3，中心在原点
# 每个面：(左上角, 列方向, 行方向)，与面内行优先编号一致
FACE_FRAMES: Dict[Face, Tuple[Tuple[float, float, float], Tuple[int, int, int], Tuple[int, int, int]]] = {
    Face.FRONT: ((-1.5, 1.5, 1.5), (1, 0, 0), (0, -1, 0)),
    Face.BACK: ((1.5, 1.5, -1.5), (-1, 0, 0), (0, -1, 0)),
    Face.UP: ((-1.5, 1.5, -1.5), (1, 0, 0), (0, 0, 1)),
    Face.DOWN: ((-1.5, -1.5, 1.5), (1, 0, 0), (0, 0, -1)),
    Face.RIGHT: ((1.5, 1.5, 1.5), (0, 0, -1), (0, -1, 0)),
    Face.LEFT: ((-1.5, 1.5, -1.5), (0, 0, 1), (0, -1, 0)),
}

# y 朝上/z 朝外 → OpenCV 相机坐标（y 朝下/z 朝内）
GL_TO_CV = np.diag([1.0, -1.0, -1.0])


def view_rotation(rot_x: float, rot_y: float) -> np.ndarray:
    """Rotation about x by rot_x, then about y by rot_y (degrees)."""
    ax, ay = np.radians(rot_x), np.radians(rot_y)
    Rx = np.array([[1, 0, 0],
                   [0, np.cos(ax), -np.sin(ax)],
                   [0, np.sin(ax), np.cos(ax)]])
    Ry = np.array([[np.cos(ay), 0, np.sin(ay)],
                   [0, 1, 0],
                   [-np.sin(ay), 0, np.cos(ay)]])
    return Rx @ Ry


class MiniCubeHUD:
    def __init__(self, size=420, distance=10.0):
        self.size = size
        f = size * 2.2
        self.Kp = np.array([[f, 0, size / 2], [0, f, size / 2], [0, 0, 1]], np.float32)
        self.dist = np.zeros(5, np.float32)
        self.tvec = np.array([[0.0], [0.0], [float(distance)]], np.float64)

    def face_corners(self, face: Face) -> np.ndarray:
        """四角（TL, TR, BR, BL），物体坐标"""
        tl, right, down = (np.array(v, np.float32) for v in FACE_FRAMES[face])
        return np.float32([tl, tl + 3 * right, tl + 3 * right + 3 * down, tl + 3 * down])

    def _draw_face_grid(self, canvas, poly, face_colors_3x3):
        """绘制3x3网格并填色"""
        tl, tr, br, bl = [p.astype(np.float32) for p in poly]

        for i in range(3):
            for j in range(3):
                # 双线性插值求4角
                u0, u1 = j / 3, (j + 1) / 3
                v0, v1 = i / 3, (i + 1) / 3

                p00 = tl * (1 - u0) * (1 - v0) + tr * u0 * (1 - v0) + br * u0 * v0 + bl * (1 - u0) * v0
                p10 = tl * (1 - u1) * (1 - v0) + tr * u1 * (1 - v0) + br * u1 * v0 + bl * (1 - u1) * v0
                p11 = tl * (1 - u1) * (1 - v1) + tr * u1 * (1 - v1) + br * u1 * v1 + bl * (1 - u1) * v1
                p01 = tl * (1 - u0) * (1 - v1) + tr * u0 * (1 - v1) + br * u0 * v1 + bl * (1 - u0) * v1

                quad = np.int32([p00, p10, p11, p01])
                cv2.fillConvexPoly(canvas, quad, COLOR_TO_BGR[face_colors_3x3[i][j]])
                cv2.polylines(canvas, [quad], True, (40, 40, 40), 2, cv2.LINE_AA)

    def draw_order(self, R_cv: np.ndarray):
        """远的面先画"""
        order = []
        for face in Face:
            center = self.face_corners(face).mean(0)
            z = (R_cv @ center.reshape(3, 1))[2, 0] + self.tvec[2, 0]
            order.append((-z, int(face)))
        order.sort()
        return [Face(f) for _, f in order]

    def render(self, frame, state_manager, rot_x: float, rot_y: float,
               origin: Optional[Tuple[int, int]] = None):
        """渲染到 frame（默认右上角）"""
        H, W = frame.shape[:2]
        if origin is None:
            origin = (W - self.size - 10, 10)
        x0, y0 = origin
        canvas = np.zeros((self.size, self.size, 3), np.uint8)

        R_cv = GL_TO_CV @ view_rotation(rot_x, rot_y)
        rvec, _ = cv2.Rodrigues(R_cv)

        for face in self.draw_order(R_cv):
            pts2, _ = cv2.projectPoints(self.face_corners(face), rvec, self.tvec, self.Kp, self.dist)
            poly = pts2.reshape(-1, 2)
            self._draw_face_grid(canvas, poly, state_manager.get_face_colors(FACE_LETTERS[face]))
            cv2.polylines(canvas, [np.int32(poly)], True, (200, 200, 200), 2, cv2.LINE_AA)

        cv2.rectangle(canvas, (0, 0), (self.size - 1, self.size - 1), (100, 100, 100), 1)

        frame[y0:y0 + self.size, x0:x0 + self.size] = canvas
        return frame
