# Render/tour_image.py
from __future__ import annotations
import cv2
import numpy as np
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from Tour.board import TourBoard, BORDER

# --------------------------- Config ---------------------------

@dataclass
class RenderConfig:
    pitch: int = 64                    # px per square
    margin: int = 16                   # px around the board

    # BGR colours
    light: Tuple[int, int, int] = (181, 217, 240)
    dark: Tuple[int, int, int] = (99, 136, 181)
    path_color: Tuple[int, int, int] = (40, 40, 200)
    start_color: Tuple[int, int, int] = (60, 170, 60)
    end_color: Tuple[int, int, int] = (30, 30, 30)
    text_color: Tuple[int, int, int] = (20, 20, 20)

    line_thickness: int = 2
    marker_ratio: float = 0.18         # marker radius / pitch
    font_scale_ratio: float = 0.008    # font scale / pitch
    draw_numbers: bool = True

# --------------------------- Helpers ---------------------------

def _center(row: int, col: int, cfg: RenderConfig) -> Tuple[int, int]:
    """Pixel centre (x, y) of a board square"""
    x = cfg.margin + (col - BORDER) * cfg.pitch + cfg.pitch // 2
    y = cfg.margin + (row - BORDER) * cfg.pitch + cfg.pitch // 2
    return (x, y)

def _draw_squares(img: np.ndarray, side: int, cfg: RenderConfig) -> None:
    for r in range(side):
        for c in range(side):
            x0 = cfg.margin + c * cfg.pitch
            y0 = cfg.margin + r * cfg.pitch
            color = cfg.light if (r + c) % 2 == 0 else cfg.dark
            cv2.rectangle(img, (x0, y0), (x0 + cfg.pitch - 1, y0 + cfg.pitch - 1), color, -1)

def _draw_label(img: np.ndarray, text: str, center: Tuple[int, int], cfg: RenderConfig) -> None:
    scale = max(0.3, cfg.pitch * cfg.font_scale_ratio)
    (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, 1)
    org = (center[0] - tw // 2, center[1] + th // 2)
    cv2.putText(img, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, cfg.text_color, 1, cv2.LINE_AA)

# --------------------------- Public API ---------------------------

def draw_tour(board: TourBoard, cfg: RenderConfig | None = None) -> np.ndarray:
    """
    Draw the playable region with the tour path on top.

    Returns a BGR uint8 image. Squares without a visit number are left plain,
    so partial boards render too.
    """
    cfg = cfg or RenderConfig()
    extent = board.side * cfg.pitch + 2 * cfg.margin
    img = np.full((extent, extent, 3), 255, np.uint8)

    _draw_squares(img, board.side, cfg)

    path: List[Tuple[int, int]] = board.path()
    centers = [_center(r, c, cfg) for r, c in path]

    if len(centers) > 1:
        pts = np.array(centers, np.int32).reshape(-1, 1, 2)
        cv2.polylines(img, [pts], False, cfg.path_color, cfg.line_thickness, cv2.LINE_AA)

    radius = max(2, int(round(cfg.pitch * cfg.marker_ratio)))
    if centers:
        cv2.circle(img, centers[0], radius, cfg.start_color, -1, cv2.LINE_AA)
        if len(centers) > 1:
            cv2.circle(img, centers[-1], radius, cfg.end_color, 2, cv2.LINE_AA)

    if cfg.draw_numbers:
        for step, center in enumerate(centers, 1):
            _draw_label(img, str(step), center, cfg)

    return img

def save_tour_image(board: TourBoard, output_path: str, cfg: RenderConfig | None = None) -> str:
    """Render the board and write it to output_path (format from the extension)"""
    img = draw_tour(board, cfg)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output_path), img):
        raise RuntimeError(f"[render] Could not write image: {output_path}")
    print(f"[output] Tour image: {output_path}")
    return str(output_path)
