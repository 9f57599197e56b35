from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.core.exceptions import ValidationError


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="Name")
    last_name: str = Field(default="", alias="LastName")
    balance: Decimal = Field(default=Decimal("0"), alias="Balance")
    orders: list[int] | None = Field(default=None, alias="Orders")  # informational only


def check_name(name: str, last_name: str) -> None:
    if not name or not last_name:
        raise ValidationError(
            "name or last name cannot be empty",
            details={"name": name, "last_name": last_name},
        )


def new_user(name: str, last_name: str) -> User:
    """User with zero balance and no orders."""
    check_name(name, last_name)
    return User(name=name, last_name=last_name)
