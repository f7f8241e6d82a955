"""Declarative constraints: pydantic markers placed in Annotated metadata.

    @dataclass
    class CreateUser:
        name: Annotated[str | None, Field(max_length=50), Required()]
        email: Annotated[str | None, EmailAddress(), Required()]
        age: Annotated[int | None, Field(ge=0, le=150)] = None
        homepage: Annotated[str | None, Url()] = None

Lengths, bounds and patterns are plain pydantic `Field(...)` constraints.
The markers here cover what pydantic has no constraint for: presence,
e-mail shape, absolute URLs and caller-written predicates.

Every marker except Required treats None as valid, so optional fields
only get checked when a value is present. Required() goes last: it then
wraps the Field constraints and runs before all of them.

A failing marker raises PydanticCustomError with its message as the
template and no context, so the message is reported verbatim.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, ValidationError
from pydantic_core import CoreSchema, PydanticCustomError, SchemaValidator, core_schema

from guardclause import guard
from guardclause.domain import rules


@dataclass(frozen=True, slots=True)
class Constraint(ABC):
    """Base for markers that run after pydantic's type validation.

    Subclasses implement:
    - error_type: pydantic error type reported in errors()
    - default_message: message used when no custom message given
    - check: rule check for a value of the validated type

    Attributes:
        message: Custom message, reported verbatim instead of default_message.
    """

    message: str | None = field(default=None, kw_only=True)

    skips_none: ClassVar[bool] = True

    @property
    @abstractmethod
    def error_type(self) -> str:
        """Error type, snake_case like pydantic's own."""

    @property
    @abstractmethod
    def default_message(self) -> str:
        """Message used when no custom message given."""

    @abstractmethod
    def check(self, value: Any) -> bool:
        """True if value satisfies the constraint."""

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(self._validate, handler(source_type))

    def _validate(self, value: Any) -> Any:
        if value is None and self.skips_none:
            return value
        if not self.check(value):
            raise PydanticCustomError(self.error_type, self.failure_message)
        return value

    @property
    def failure_message(self) -> str:
        """Message reported when check fails."""
        return self.message if self.message is not None else self.default_message


@dataclass(frozen=True, slots=True)
class Required(Constraint):
    """Value must be present. Strings must not be blank unless allowed.

    Runs before type validation, so None and blank strings are reported
    as missing rather than as a wrong type.

    Attributes:
        allow_empty_strings: Accept "" and whitespace-only strings.
    """

    allow_empty_strings: bool = False

    skips_none: ClassVar[bool] = False

    @property
    def error_type(self) -> str:
        return "required"

    @property
    def default_message(self) -> str:
        return "Field required"

    def check(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str) and not self.allow_empty_strings:
            return rules.is_not_blank(value)
        return True

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_before_validator_function(self._validate, handler(source_type))


@dataclass(frozen=True, slots=True)
class EmailAddress(Constraint):
    """String is an e-mail address: one @, dotted domain, no whitespace."""

    @property
    def error_type(self) -> str:
        return "email"

    @property
    def default_message(self) -> str:
        return "Value is not a valid e-mail address"

    def check(self, value: Any) -> bool:
        return isinstance(value, str) and rules.is_email_address(value)


@dataclass(frozen=True, slots=True)
class Url(Constraint):
    """String is an absolute URL with a host and an allowed scheme.

    Parsed by pydantic-core's URL validator; the field keeps its str value.

    Attributes:
        schemes: Allowed schemes (default: http, https, ftp).
    """

    schemes: frozenset[str] = rules.DEFAULT_URL_SCHEMES
    _validator: SchemaValidator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        guard.not_empty(self.schemes, name="schemes")
        url_schema = core_schema.url_schema(allowed_schemes=sorted(self.schemes), host_required=True)
        object.__setattr__(self, "_validator", SchemaValidator(url_schema))

    @property
    def error_type(self) -> str:
        return "url"

    @property
    def default_message(self) -> str:
        return "Value is not a valid absolute URL"

    def check(self, value: Any) -> bool:
        try:
            self._validator.validate_python(value)
        except ValidationError:
            return False
        return True


@dataclass(frozen=True, slots=True)
class Check(Constraint):
    """Custom check: func(value) must be truthy.

    Extension point for rules pydantic has no constraint for. text is
    required because no sensible default exists.
    """

    func: Callable[[Any], bool]
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        guard.requires(self.func, callable, "func must be callable", name="func")
        guard.not_null_or_white_space(self.text, name="text")

    @property
    def error_type(self) -> str:
        return "check"

    @property
    def default_message(self) -> str:
        return self.text

    def check(self, value: Any) -> bool:
        return rules.satisfies(value, self.func)
