"""
Typed records returned by the Buy Me a Coffee API.

Every record carries a static ``FIELDS`` table mapping the API's field
names onto attribute names. Decoding is driven entirely by that table,
so adding a field means adding one row and one attribute.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from buymeacoffee.errors import DecodeError

T = TypeVar("T", bound="Record")

_MISSING = object()

# Inclusive ranges of the unsigned integer widths the API uses.
U8 = (0, 0xFF)
U16 = (0, 0xFFFF)
U32 = (0, 0xFFFF_FFFF)


class MemberStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ALL = "all"


@dataclass(frozen=True)
class FieldSpec:
    """One row of a rename table: API field `api_name` decodes into attribute `attr`."""
    attr: str
    api_name: str
    kind: type
    nullable: bool = False
    default: Any = _MISSING
    bounds: tuple[int, int] | None = None


def _check_type(value: Any, kind: type) -> bool:
    if kind is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, kind)


def _in_bounds(value: Any, bounds: tuple[int, int] | None) -> bool:
    return bounds is None or bounds[0] <= value <= bounds[1]


def _decode_fields(fields: tuple[FieldSpec, ...], data: Any, owner: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"{owner}: expected a JSON object, got {type(data).__name__}")

    values = {}
    for spec in fields:
        if spec.api_name not in data:
            if spec.nullable:
                values[spec.attr] = None
                continue
            if spec.default is not _MISSING:
                values[spec.attr] = spec.default
                continue
            raise DecodeError(f"{owner}: missing field '{spec.api_name}'")

        value = data[spec.api_name]
        if value is None:
            if not spec.nullable:
                raise DecodeError(f"{owner}: field '{spec.api_name}' must not be null")
            values[spec.attr] = None
        elif isinstance(spec.kind, type) and issubclass(spec.kind, Record):
            values[spec.attr] = spec.kind.from_api(value)
        elif _check_type(value, spec.kind):
            if not _in_bounds(value, spec.bounds):
                raise DecodeError(
                    f"{owner}: field '{spec.api_name}' value {value} is outside {spec.bounds}"
                )
            values[spec.attr] = value
        else:
            raise DecodeError(
                f"{owner}: field '{spec.api_name}' expected {spec.kind.__name__}, "
                f"got {type(value).__name__}"
            )
    return values


class Record:
    """Base for records decoded from a rename table."""

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = ()

    @classmethod
    def from_api(cls, data: Any):
        return cls(**_decode_fields(cls.FIELDS, data, cls.__name__))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated list endpoint, items in server order."""
    current_page: int
    data: list[T]
    from_: int
    last_page: int
    per_page: int
    to: int
    total: int

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("current_page", "current_page", int, bounds=U16),
        FieldSpec("data", "data", list),
        FieldSpec("from_", "from", int, bounds=U16),
        FieldSpec("last_page", "last_page", int, bounds=U16),
        FieldSpec("per_page", "per_page", int, bounds=U16),
        FieldSpec("to", "to", int, bounds=U16),
        FieldSpec("total", "total", int, bounds=U16),
    )

    @classmethod
    def from_api(cls, data: Any, item: type[T]) -> "Page[T]":
        values = _decode_fields(cls.FIELDS, data, "Page")
        values["data"] = [item.from_api(entry) for entry in values["data"]]
        return cls(**values)


@dataclass(frozen=True)
class Membership(Record):
    id: int
    cancelled_on: str | None
    created_on: str
    updated_on: str
    current_period_start: str
    current_period_end: str
    coffee_price: str
    coffee_num: int
    is_cancelled: bool
    is_cancelled_at_period_end: bool
    currency: str
    message: str | None
    message_visibility: int
    duration_type: str
    referer: str | None
    country: str | None
    transaction_id: str
    payer_email: str
    payer_name: str

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("id", "subscription_id", int, bounds=U32),
        FieldSpec("cancelled_on", "subscription_cancelled_on", str, nullable=True),
        FieldSpec("created_on", "subscription_created_on", str),
        FieldSpec("updated_on", "subscription_updated_on", str),
        FieldSpec("current_period_start", "subscription_current_period_start", str),
        FieldSpec("current_period_end", "subscription_current_period_end", str),
        FieldSpec("coffee_price", "subscription_coffee_price", str),
        FieldSpec("coffee_num", "subscription_coffee_num", int, bounds=U16),
        FieldSpec("is_cancelled", "subscription_is_cancelled", bool, default=False),
        FieldSpec("is_cancelled_at_period_end", "subscription_is_cancelled_at_period_end", bool, default=False),
        FieldSpec("currency", "subscription_currency", str),
        FieldSpec("message", "subscription_message", str, nullable=True),
        FieldSpec("message_visibility", "message_visibility", int, bounds=U8),
        FieldSpec("duration_type", "subscription_duration_type", str),
        FieldSpec("referer", "referer", str, nullable=True),
        FieldSpec("country", "country", str, nullable=True),
        FieldSpec("transaction_id", "transaction_id", str),
        FieldSpec("payer_email", "payer_email", str),
        FieldSpec("payer_name", "payer_name", str),
    )


@dataclass(frozen=True)
class Support(Record):
    id: int
    note: str | None
    coffee_num: int
    transaction_id: str
    visibility: int
    created_on: str
    updated_on: str
    transfer_id: str | None
    supporter_name: str | None
    coffee_price: str
    email: str
    is_refunded: bool
    currency: str
    note_pinned: int
    referer: str | None
    country: str | None
    payer_email: str
    payment_platform: str
    payer_name: str

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("id", "support_id", int, bounds=U32),
        FieldSpec("note", "support_note", str, nullable=True),
        FieldSpec("coffee_num", "support_coffees", int, bounds=U16),
        FieldSpec("transaction_id", "transaction_id", str),
        FieldSpec("visibility", "support_visibility", int, bounds=U8),
        FieldSpec("created_on", "support_created_on", str),
        FieldSpec("updated_on", "support_updated_on", str),
        FieldSpec("transfer_id", "transfer_id", str, nullable=True),
        FieldSpec("supporter_name", "supporter_name", str, nullable=True),
        FieldSpec("coffee_price", "support_coffee_price", str),
        FieldSpec("email", "support_email", str),
        FieldSpec("is_refunded", "is_refunded", bool, default=False),
        FieldSpec("currency", "support_currency", str),
        FieldSpec("note_pinned", "support_note_pinned", int, bounds=U8),
        FieldSpec("referer", "referer", str, nullable=True),
        FieldSpec("country", "country", str, nullable=True),
        FieldSpec("payer_email", "payer_email", str),
        FieldSpec("payment_platform", "payment_platform", str),
        FieldSpec("payer_name", "payer_name", str),
    )


@dataclass(frozen=True)
class Extra(Record):
    """The reward an extra purchase was made for."""
    id: int
    title: str
    description: str
    confirmation_message: str
    question: str
    used: int
    created_on: str
    updated_on: str
    deleted_on: str | None
    is_active: bool
    image: str
    slots: int
    coffee_price: str
    order: int

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("id", "reward_id", int, bounds=U32),
        FieldSpec("title", "reward_title", str),
        FieldSpec("description", "reward_description", str),
        FieldSpec("confirmation_message", "reward_confirmation_message", str),
        FieldSpec("question", "reward_question", str),
        FieldSpec("used", "reward_used", int, bounds=U8),
        FieldSpec("created_on", "reward_created_on", str),
        FieldSpec("updated_on", "reward_updated_on", str),
        FieldSpec("deleted_on", "reward_deleted_on", str, nullable=True),
        FieldSpec("is_active", "reward_is_active", bool),
        FieldSpec("image", "reward_image", str),
        FieldSpec("slots", "reward_slots", int, bounds=U8),
        FieldSpec("coffee_price", "reward_coffee_price", str),
        FieldSpec("order", "reward_order", int, bounds=U8),
    )


@dataclass(frozen=True)
class Purchase(Record):
    id: int
    created_on: str
    updated_on: str
    is_revoked: bool
    amount: str
    currency: str
    question: str
    payer_email: str
    payer_name: str
    extra: Extra

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("id", "purchase_id", int, bounds=U32),
        FieldSpec("created_on", "purchased_on", str),
        FieldSpec("updated_on", "purchase_updated_on", str),
        FieldSpec("is_revoked", "purchase_is_revoked", bool),
        FieldSpec("amount", "purchase_amount", str),
        FieldSpec("currency", "purchase_currency", str),
        FieldSpec("question", "purchase_question", str),
        FieldSpec("payer_email", "payer_email", str),
        FieldSpec("payer_name", "payer_name", str),
        FieldSpec("extra", "extra", Extra),
    )
