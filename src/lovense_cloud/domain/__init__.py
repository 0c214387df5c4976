"""Domain models shared across the lovense-cloud components."""

from lovense_cloud.domain.models import (
    API_VERSION,
    DEFAULT_UID,
    CommandFields,
    CommandPayload,
    Credentials,
    ToolDescriptor,
    ToolInvocation,
)

__all__ = [
    "API_VERSION",
    "DEFAULT_UID",
    "CommandFields",
    "CommandPayload",
    "Credentials",
    "ToolDescriptor",
    "ToolInvocation",
]
