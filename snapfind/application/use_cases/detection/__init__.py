from .analyze_image import AnalyzeImageUseCase

__all__ = ["AnalyzeImageUseCase"]
