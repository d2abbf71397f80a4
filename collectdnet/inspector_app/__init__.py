from collectdnet.inspector_app.config import InspectorSettings, get_settings
from collectdnet.inspector_app.logging import RingBufferHandler, create_logger
from collectdnet.inspector_app.models import SampleModel, ValueModel, sample_model

__all__ = [
    "InspectorSettings",
    "RingBufferHandler",
    "SampleModel",
    "ValueModel",
    "create_logger",
    "get_settings",
    "sample_model",
]
