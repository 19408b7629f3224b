"""Validated write operations.

Each action takes the services container and a mapping of raw form values
(strings, as typed by a user), validates them with a pydantic model and
forwards them to the matching service. Actions never raise: the outcome is
reported through an ActionState.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, BeforeValidator, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from models.transaction import Transaction
from logger import get_logger

logger = get_logger()

FIX_FIELDS_MESSAGE = "Fix the highlighted fields and retry."
MAX_AMOUNT_DIGITS = 12

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")
_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass
class ActionState:
    status: Literal["idle", "success", "error"] = "idle"
    message: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "success"


def map_validation_errors(error: ValidationError) -> Dict[str, str]:
    """Flatten pydantic errors into {field path: first message}."""
    result: Dict[str, str] = {}
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"]) or "form"
        if path not in result:
            result[path] = issue["msg"]
    return result


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _parse_decimal(value: Any, message: str) -> Any:
    if value is None or isinstance(value, Decimal):
        return value
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        raise PydanticCustomError("decimal_parsing", message)
    if not parsed.is_finite():
        raise PydanticCustomError("decimal_parsing", message)
    return parsed


def _require_length(value: str, minimum: int, message: str) -> str:
    if len(value) < minimum:
        raise PydanticCustomError("string_too_short", message)
    return value


OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
OptionalId = Annotated[Optional[int], BeforeValidator(_blank_to_none)]
Text = Annotated[str, BeforeValidator(_strip)]
# Amounts are stored as REAL; twelve significant digits survive the float round trip
Money = Annotated[Decimal, Field(max_digits=MAX_AMOUNT_DIGITS, decimal_places=2)]


class WalletForm(BaseModel):
    name: Text
    default_currency: Text
    owner_team_id: OptionalId = None
    monthly_budget: Optional[Money] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _require_length(value, 2, "Enter a name with at least 2 characters.")

    @field_validator("default_currency")
    @classmethod
    def check_currency(cls, value: str) -> str:
        return _require_length(value, 3, "Provide a 3-letter currency code.").upper()

    @field_validator("monthly_budget", mode="before")
    @classmethod
    def parse_budget(cls, value: Any) -> Any:
        return _parse_decimal(_blank_to_none(value), "Enter a numeric budget.")

    @field_validator("monthly_budget")
    @classmethod
    def check_budget(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        if value is not None and value < 0:
            raise PydanticCustomError("greater_than_equal", "Budget must be positive.")
        return value


class CategoryForm(BaseModel):
    wallet_id: int
    name: Text
    type: Literal["expense", "income"]
    color: OptionalText = None
    icon: OptionalText = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _require_length(value, 2, "Name must be at least 2 characters.")

    @field_validator("color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not _HEX_COLOR.match(value):
            raise PydanticCustomError("hex_color", "Use a valid hex color like #22c55e.")
        return value

    @field_validator("icon")
    @classmethod
    def check_icon(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) > 64:
            raise PydanticCustomError("string_too_long", "Icon name is too long.")
        return value


class TransactionForm(BaseModel):
    wallet_id: int
    type: Literal["expense", "income"]
    category_id: OptionalId = None
    amount: Money
    occurred_at: date
    memo: OptionalText = None
    merchant: OptionalText = None

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        if _blank_to_none(value) is None:
            raise PydanticCustomError("missing", "Amount is required.")
        return _parse_decimal(value, "Enter a numeric amount.")

    @field_validator("amount")
    @classmethod
    def check_amount(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise PydanticCustomError("greater_than", "Amount must be greater than zero.")
        return value

    @field_validator("occurred_at", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("missing", "Provide a date.")
        if not _DATE_ONLY.match(value.strip()):
            raise PydanticCustomError("date_format", "Use a valid date in YYYY-MM-DD format.")
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise PydanticCustomError("date_parsing", "Use a valid date.")


class TransactionUpdateForm(TransactionForm):
    transaction_id: int


class TransactionDeleteForm(BaseModel):
    wallet_id: int
    transaction_id: int


class BudgetForm(BaseModel):
    wallet_id: int
    category_id: OptionalId = None
    limit: Money
    interval: Literal["monthly", "quarterly", "yearly", "custom"]
    rollover: bool = False

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, value: Any) -> Any:
        if _blank_to_none(value) is None:
            raise PydanticCustomError("missing", "Budget limit is required.")
        return _parse_decimal(value, "Enter a numeric limit.")

    @field_validator("limit")
    @classmethod
    def check_limit(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise PydanticCustomError("greater_than", "Budget must be greater than zero.")
        return value

    @field_validator("rollover", mode="before")
    @classmethod
    def parse_rollover(cls, value: Any) -> Any:
        return False if value is None or value == "" else value


class CreateTeamForm(BaseModel):
    wallet_id: int
    team_name: Text

    @field_validator("team_name")
    @classmethod
    def check_team_name(cls, value: str) -> str:
        return _require_length(value, 2, "Team name must be at least 2 characters.")


class AttachTeamForm(BaseModel):
    wallet_id: int
    team_id: int


class AddMemberForm(BaseModel):
    wallet_id: int
    user_id: Text
    role: Literal["owner", "member", "viewer"]

    @field_validator("user_id")
    @classmethod
    def check_user(cls, value: str) -> str:
        return _require_length(value, 1, "Select a user.")


def _invalid(error: ValidationError) -> ActionState:
    return ActionState(
        status="error",
        message=FIX_FIELDS_MESSAGE,
        field_errors=map_validation_errors(error),
    )


def _failed(error: Exception, fallback: str) -> ActionState:
    logger.error(f"{fallback} {error}")
    return ActionState(status="error", message=str(error) or fallback)


def _field_error(field_name: str, message: str) -> ActionState:
    return ActionState(
        status="error", message=FIX_FIELDS_MESSAGE, field_errors={field_name: message}
    )


def _check_wallet(services, wallet_id: int) -> Optional[ActionState]:
    if services.wallets.find(wallet_id) is None:
        return _field_error("wallet_id", f"Wallet with ID {wallet_id} not found.")
    return None


def _check_category(services, wallet_id: int, category_id: Optional[int]) -> Optional[ActionState]:
    """Categories may only be used inside the wallet that owns them."""
    if category_id is None:
        return None
    category = services.categories.find(category_id)
    if category is None or category.wallet_id != wallet_id:
        return _field_error("category_id", "Choose a category from this wallet.")
    return None


def create_wallet_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = WalletForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    try:
        services.wallets.create(
            form.name,
            form.default_currency,
            owner_team_id=form.owner_team_id,
            monthly_budget=form.monthly_budget,
        )
    except Exception as e:
        return _failed(e, "Unable to create wallet.")

    return ActionState(status="success", message=f'Wallet "{form.name}" created.')


def create_category_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = CategoryForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    problem = _check_wallet(services, form.wallet_id)
    if problem:
        return problem

    try:
        services.categories.create(
            form.wallet_id, form.name, form.type, color=form.color, icon=form.icon
        )
    except Exception as e:
        return _failed(e, "Unable to create category.")

    return ActionState(status="success", message="Category created.")


def create_transaction_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = TransactionForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    problem = _check_wallet(services, form.wallet_id) or _check_category(
        services, form.wallet_id, form.category_id
    )
    if problem:
        return problem

    try:
        services.transactions.create(
            form.wallet_id,
            form.type,
            form.amount,
            form.occurred_at,
            category_id=form.category_id,
            memo=form.memo,
            merchant=form.merchant,
        )
    except Exception as e:
        return _failed(e, "Unable to save transaction.")

    return ActionState(status="success", message="Transaction recorded.")


def update_transaction_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = TransactionUpdateForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    problem = _check_category(services, form.wallet_id, form.category_id)
    if problem:
        return problem

    try:
        services.transactions.update(
            Transaction(
                id=form.transaction_id,
                wallet_id=form.wallet_id,
                amount=form.amount,
                type=form.type,
                occurred_at=form.occurred_at,
                category_id=form.category_id,
                memo=form.memo,
                merchant=form.merchant,
            )
        )
    except Exception as e:
        return _failed(e, "Unable to update transaction.")

    return ActionState(status="success", message="Transaction updated.")


def delete_transaction_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = TransactionDeleteForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    transaction = services.transactions.find(form.transaction_id)
    if transaction is None or transaction.wallet_id != form.wallet_id:
        return ActionState(
            status="error", message=f"Transaction with ID {form.transaction_id} not found."
        )

    try:
        services.transactions.delete(form.transaction_id)
    except Exception as e:
        return _failed(e, "Unable to delete transaction.")

    return ActionState(status="success", message="Transaction deleted.")


def create_budget_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = BudgetForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    problem = _check_wallet(services, form.wallet_id) or _check_category(
        services, form.wallet_id, form.category_id
    )
    if problem:
        return problem

    try:
        services.budgets.create(
            form.wallet_id,
            form.limit,
            form.interval,
            category_id=form.category_id,
            rollover=form.rollover,
        )
    except Exception as e:
        return _failed(e, "Unable to save budget.")

    return ActionState(status="success", message="Budget saved.")


def create_wallet_team_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = CreateTeamForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    problem = _check_wallet(services, form.wallet_id)
    if problem:
        return problem

    try:
        services.teams.create_for_wallet(form.wallet_id, form.team_name)
    except Exception as e:
        return _failed(e, "Unable to create team.")

    return ActionState(status="success", message="Team created and linked to wallet.")


def attach_team_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = AttachTeamForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    try:
        services.teams.attach_to_wallet(form.wallet_id, form.team_id)
    except Exception as e:
        return _failed(e, "Unable to link team.")

    return ActionState(status="success", message="Team linked to wallet.")


def add_team_member_action(services, data: Mapping[str, Any]) -> ActionState:
    try:
        form = AddMemberForm.model_validate(dict(data))
    except ValidationError as e:
        return _invalid(e)

    try:
        services.teams.add_member_to_wallet(form.wallet_id, form.user_id, form.role)
    except Exception as e:
        return _failed(e, "Unable to add member.")

    return ActionState(status="success", message="Team member added.")
