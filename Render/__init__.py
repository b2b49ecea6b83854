"""
Image rendering of knight's tours (OpenCV)
"""

from .tour_image import RenderConfig, draw_tour, save_tour_image

__all__ = [
    'RenderConfig',
    'draw_tour',
    'save_tour_image',
]
