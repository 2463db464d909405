import json
from typing import Any, Dict, Iterable

from notification_channels.modules.channels.twilio.models.messages import TwilioMessage


def fill_optional_params(
    params: Dict[str, Any], message: TwilioMessage, optional_params: Iterable[str]
) -> Dict[str, Any]:
    """
    Copy optional message attributes into the Twilio request parameters.

    Only truthy values are copied, under the same key. Unset, empty,
    zero and False values are left out of the request entirely.

    Args:
        params: Parameters under construction (updated in place)
        message: Message to read the attributes from
        optional_params: Attribute names to copy

    Returns:
        The same ``params`` dict
    """
    for name in optional_params:
        value = getattr(message, name, None)
        if value:
            params[name] = value
    return params


def build_sms_binding(address: str) -> str:
    """
    Build the Notify ``to_binding`` for an SMS address.

    Produces ``{"binding_type":"sms", "address":"<address>"}`` with the
    address JSON-escaped.
    """
    return json.dumps(
        {"binding_type": "sms", "address": address},
        separators=(", ", ":"),
        ensure_ascii=False,
    )
