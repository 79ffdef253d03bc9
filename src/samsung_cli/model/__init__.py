"""
model - Acceso a los nodos sysfs

Este paquete contiene las clases del Modelo:
- FeaturePaths / resolve_paths: Tabla de rutas efectivas
- read_line / write_value: Acceso a archivos sysfs
- Errores de la herramienta
"""

from .errors import SamsungCliError
from .paths import FeaturePaths, detect_feature_path, resolve_paths
from .sysfs import read_line, write_value

__all__ = [
    'SamsungCliError',
    'FeaturePaths',
    'detect_feature_path',
    'resolve_paths',
    'read_line',
    'write_value',
]
