"""
Wire field mapping.

The pairs between JSON keys and schema field names are kept here as plain
tables rather than as aliases on the schemas. decode() and encode() apply a
table to any schema, so adding a wire shape only needs a new table.
"""
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from aura.exceptions import WireDecodeError
from aura.schemas import AccountApiResponse, AccountsApiResponse, Transfer

ModelT = TypeVar("ModelT", bound=BaseModel)

# wire key -> schema field
ACCOUNTS_ENVELOPE_KEY = "accounts"

ACCOUNT_FIELDS: dict[str, str] = {
    "id": "id",
    "main": "is_main",
    "balance": "balance",
}

TRANSFER_FIELDS: dict[str, str] = {
    "sender": "sender_id",
    "recipient": "recipient_id",
    "amount": "amount",
}


def decode(model: type[ModelT], payload: Any, field_map: Mapping[str, str]) -> ModelT:
    """
    Build a schema instance from a wire payload.

    Args:
        model: The pydantic schema to validate against
        payload: The decoded JSON object
        field_map: Wire key to schema field name table

    Returns:
        A validated, immutable schema instance

    Raises:
        WireDecodeError: If the payload is not an object or fails validation
    """
    if not isinstance(payload, Mapping):
        raise WireDecodeError(
            f"expected an object for {model.__name__}, got {type(payload).__name__}"
        )

    # Keys outside the table are not part of the wire shape and are dropped
    renamed = {field_map[key]: value for key, value in payload.items() if key in field_map}
    try:
        return model.model_validate(renamed)
    except ValidationError as e:
        raise WireDecodeError(str(e)) from e


def encode(instance: BaseModel, field_map: Mapping[str, str]) -> dict[str, Any]:
    """Dump a schema instance back to its wire keys."""
    reverse = {field: key for key, field in field_map.items()}
    return {reverse.get(name, name): value for name, value in instance.model_dump().items()}


def decode_accounts(payload: Any) -> Optional[list[AccountApiResponse]]:
    """
    Decode an accounts reply.

    Accepts the enveloped form {"accounts": [...]} as well as a bare array.
    A JSON null decodes to None (no body).
    """
    if payload is None:
        return None

    if isinstance(payload, Mapping):
        if ACCOUNTS_ENVELOPE_KEY not in payload:
            raise WireDecodeError(f"missing '{ACCOUNTS_ENVELOPE_KEY}' key")
        items = payload[ACCOUNTS_ENVELOPE_KEY]
    else:
        items = payload

    if not isinstance(items, list):
        raise WireDecodeError(f"expected a list of accounts, got {type(items).__name__}")

    envelope = AccountsApiResponse(
        accounts=[decode(AccountApiResponse, item, ACCOUNT_FIELDS) for item in items]
    )
    return envelope.accounts


def decode_transfer(payload: Any) -> Transfer:
    return decode(Transfer, payload, TRANSFER_FIELDS)


def encode_transfer(transfer: Transfer) -> dict[str, Any]:
    return encode(transfer, TRANSFER_FIELDS)
