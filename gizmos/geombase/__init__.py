"""
Базовая геометрия для гизмо.

- Frame3 - положение + ориентация (матрица поворота)
- вспомогательные функции: перпендикуляр, точки окружности, форматирование значений
"""

from .frame import Frame3, FrameLike, as_frame, as_vec3
from .math_helpers import format_value, generate_circle_points, perpendicular_vector

__all__ = [
    "Frame3",
    "FrameLike",
    "as_frame",
    "as_vec3",
    "format_value",
    "generate_circle_points",
    "perpendicular_vector",
]
