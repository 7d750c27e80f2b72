from clipboard_masker_lib.data_models.settings import Configuration, CustomPattern
from clipboard_masker_lib.data_models.masking import MaskingResult

__all__ = ["Configuration", "CustomPattern", "MaskingResult"]
