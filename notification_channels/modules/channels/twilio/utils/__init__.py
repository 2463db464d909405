from .helpers import build_sms_binding, fill_optional_params

__all__ = ["build_sms_binding", "fill_optional_params"]
