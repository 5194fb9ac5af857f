from __future__ import annotations

from typing import Optional


class AnalysisError(ValueError):
    """
    Error de análisis con mensaje apto para mostrar al usuario.
    El que llama muestra `message` y no dibuja diagramas.
    """
    message: str = "Analysis failed."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnsupportedSupportCount(AnalysisError):
    message = "Please ensure exactly 2 supports."

    def __init__(self, count: int):
        self.count = int(count)
        super().__init__()


class DegenerateSupports(AnalysisError):
    message = "Supports cannot be at the same location."

    def __init__(self, x_m: float):
        self.x_m = float(x_m)
        super().__init__()
