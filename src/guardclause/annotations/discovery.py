"""Rule discovery: model instance -> flat sequence of ValidationResult.

The aggregator depends only on RuleDiscovery, so grouping logic is
independent of how rules are declared. DeclaredRuleDiscovery is the
default: it validates the model's Annotated fields with pydantic, then
runs the model's own validate() hook if it opted in.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import typing
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Protocol, TypedDict

from pydantic import ConfigDict, TypeAdapter, ValidationError, with_config

from guardclause.domain.report import ValidationResult

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

    from guardclause.annotations.context import ValidationContext

CONTEXT_KEY = "validation_context"
"""Key of the ValidationContext in pydantic's `info.context`."""

_FIELDS_CONFIG = ConfigDict(arbitrary_types_allowed=True)


class RuleDiscovery(Protocol):
    """Contract for rule discovery.

    Implementations must be stateless per call: two concurrent
    discoveries over different models must not interfere.
    """

    def discover(self, model: object, context: ValidationContext) -> Iterable[ValidationResult]:
        """Run all rules declared for model and yield every violation.

        Args:
            model: Object to validate (never None)
            context: Object-level validation context

        Returns:
            All violations, in discovery order (empty if valid)
        """
        ...


class ValidatableObject(ABC):
    """Opt-in object-level validation.

    Only subclasses are self-validated: an attribute that merely happens
    to be called `validate` is never invoked.

    Example:
        @dataclass
        class DateRange(ValidatableObject):
            start: date
            end: date

            def validate(self, context: ValidationContext) -> Iterable[ValidationResult]:
                if self.end < self.start:
                    yield ValidationResult("end must not precede start", ("end",))
    """

    __slots__ = ()

    @abstractmethod
    def validate(self, context: ValidationContext) -> Iterable[ValidationResult]:
        """Yield violations. Empty member_names = object-level."""


@dataclass(frozen=True, slots=True)
class DeclaredRules:
    """Pydantic schema over the constrained fields of one model type.

    Attributes:
        fields: Constrained field names, in declaration order
        adapter: Validates {field: value}; each error's loc[0] is the field
    """

    fields: tuple[str, ...]
    adapter: TypeAdapter[Any]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.fields:
            raise ValueError("fields must not be empty")

    def check(self, model: object, context: ValidationContext) -> list[ValidationResult]:
        """Validate model's current field values; one result per pydantic error."""
        values = {name: getattr(model, name, None) for name in self.fields}
        try:
            self.adapter.validate_python(values, context={CONTEXT_KEY: context})
        except ValidationError as exc:
            return [_to_result(error) for error in exc.errors(include_url=False)]
        return []


@functools.cache
def declared_rules(model_type: type) -> DeclaredRules | None:
    """Pydantic rules declared on model_type's fields, or None if none.

    Dataclasses: dataclasses.fields() order. Other classes: annotation
    order across the MRO. Only annotations carrying Annotated metadata
    are resolved, so fields typed with TYPE_CHECKING-only names are
    fine as long as they declare no constraints.

    Cached per type: the result is immutable and depends only on the
    class, never on an instance.

    Raises:
        NameError: a constrained annotation cannot be resolved
    """
    annotations = constrained_annotations(model_type)
    if not annotations:
        return None

    fields_type = TypedDict(f"{model_type.__name__}Fields", annotations)  # type: ignore[misc]
    adapter = TypeAdapter(with_config(_FIELDS_CONFIG)(fields_type))
    return DeclaredRules(fields=tuple(annotations), adapter=adapter)


def constrained_annotations(model_type: type) -> dict[str, Any]:
    """Resolved annotations of model_type's fields that carry Annotated metadata."""
    declared: dict[str, tuple[Any, type]] = {}
    for owner in reversed(model_type.__mro__):
        for name, annotation in inspect.get_annotations(owner).items():
            declared[name] = (annotation, owner)

    if dataclasses.is_dataclass(model_type):
        names: Iterable[str] = [f.name for f in dataclasses.fields(model_type)]
    else:
        names = list(declared)

    result: dict[str, Any] = {}
    for name in names:
        if name.startswith("_") or name not in declared:
            continue

        annotation, owner = declared[name]
        if isinstance(annotation, str):
            if "Annotated[" not in annotation:
                continue
            annotation = _resolve(name, annotation, owner)

        if typing.get_origin(annotation) is ClassVar:
            continue
        if _has_metadata(annotation):
            result[name] = annotation

    return result


class DeclaredRuleDiscovery:
    """Default discovery: pydantic field validation + validate() hook.

    Non-fail-fast: every constrained field is checked, and the hook of a
    ValidatableObject always runs, even when field checks already failed.
    """

    def discover(self, model: object, context: ValidationContext) -> Iterator[ValidationResult]:
        """Yield field violations, then self-validation results."""
        rules = declared_rules(type(model))
        if rules is not None:
            yield from rules.check(model, context)

        if isinstance(model, ValidatableObject):
            yield from model.validate(context)


def _resolve(name: str, annotation: str, owner: type) -> Any:
    # one-field holder: get_type_hints(owner) would resolve every field
    namespace = {"__annotations__": {name: annotation}, "__module__": owner.__module__}
    holder = type(owner.__name__, (), namespace)
    return typing.get_type_hints(holder, localns=dict(vars(owner)), include_extras=True)[name]


def _has_metadata(annotation: Any) -> bool:
    if typing.get_origin(annotation) is Annotated:
        return True
    return any(_has_metadata(arg) for arg in typing.get_args(annotation))


def _to_result(error: ErrorDetails) -> ValidationResult:
    loc = error["loc"]
    member_names = (str(loc[0]),) if loc else ()
    return ValidationResult(message=error["msg"], member_names=member_names)
