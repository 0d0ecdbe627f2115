"""
Gizmos - debug drawing library.

Transient and persistent wireframe shapes, text and raycast visualizations,
organized into named groups with layered configuration and rendered once
per frame into a wireframe sink.

Основные модули:
- core - конфигурация, состояние, буфер команд, рендер-драйвер
- primitives - примитивы (линии, кубы, сферы, пути, текст, raycast)
- render - приёмники геометрии и OpenGL-рендерер линий
- platform - окно GLFW, вызывающее обновление каждый кадр
"""

from .core import DEFAULT_CONFIG, CommandBuffer, GizmosGroup, GizmosState, RenderConfig, RenderEngine
from .geombase import Frame3
from .primitives import RaycastResult
from .render import LineBatchSink
from .api import Gizmos, vec3

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_CONFIG',
    'CommandBuffer',
    'Frame3',
    'Gizmos',
    'GizmosGroup',
    'GizmosState',
    'LineBatchSink',
    'RaycastResult',
    'RenderConfig',
    'RenderEngine',
    'vec3',
]
