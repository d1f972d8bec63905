"""
Transform matrix utilities
Builds the 4x4 model matrices handed to the OpenGL sprite quad
"""

import numpy as np


def create_translation_matrix(x: float, y: float, z: float = 0) -> np.ndarray:
    """
    Create a 4x4 translation matrix
    
    Args:
        x: Translation along X axis
        y: Translation along Y axis
        z: Translation along Z axis (default: 0)
    
    Returns:
        4x4 numpy array representing the translation matrix
    """
    return np.array([
        [1, 0, 0, x],
        [0, 1, 0, y],
        [0, 0, 1, z],
        [0, 0, 0, 1]
    ], dtype=np.float32)


def create_scale_matrix(sx: float, sy: float, sz: float = 1) -> np.ndarray:
    """
    Create a 4x4 scale matrix
    
    Args:
        sx: Scale factor along X axis
        sy: Scale factor along Y axis
        sz: Scale factor along Z axis (default: 1)
    
    Returns:
        4x4 numpy array representing the scale matrix
    """
    return np.array([
        [sx, 0, 0, 0],
        [0, sy, 0, 0],
        [0, 0, sz, 0],
        [0, 0, 0, 1]
    ], dtype=np.float32)


def matrix_multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Multiply two 4x4 matrices (``a`` applied after ``b``)"""
    return np.dot(a, b)


def to_gl_matrix(matrix: np.ndarray) -> np.ndarray:
    """Column-major copy suitable for glLoadMatrixf / glMultMatrixf"""
    return np.ascontiguousarray(matrix.T, dtype=np.float32)
