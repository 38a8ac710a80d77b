"""Record base — attribute bag with a typed schema, associations and validation.

Subclasses declare their schema and validator chain in the class body:

    class Person(Record):
        attributes = (Attribute("name", str),)
        validations = ValidationEngine([PresenceValidator("name")])
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

import structlog

from dogratings.exceptions import RecordInvalidError, UnknownAttributeError
from dogratings.validators import ValidationContext, ValidationEngine, ValidationReport

logger = structlog.get_logger()


@dataclass(frozen=True)
class Attribute:
    """Schema entry: attribute name and the value type it expects."""

    name: str
    type: type = str

    def accepts(self, value: Any) -> bool:
        """True if ``value`` is of the declared type. ``None`` is not accepted."""
        if isinstance(value, bool) and self.type is not bool:
            return False
        return isinstance(value, self.type)


@dataclass(frozen=True)
class Association:
    """``belongs_to`` reference: ``name`` resolves ``foreign_key`` against ``target``."""

    name: str
    target: str
    foreign_key: str


class Record:
    """Base class for validated records.

    Values are stored as given, without coercion. Reading or writing an
    attribute the schema does not declare raises ``UnknownAttributeError``.
    """

    attributes: ClassVar[tuple[Attribute, ...]] = ()
    belongs_to: ClassVar[tuple[Association, ...]] = ()
    validations: ClassVar[ValidationEngine]

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        # Direct subclasses without a chain get their own empty engine
        if not hasattr(cls, "validations"):
            cls.validations = ValidationEngine()

    def __init__(self, **values: Any):
        object.__setattr__(self, "id", None)
        object.__setattr__(self, "_values", {a.name: None for a in self.attributes})
        object.__setattr__(self, "_errors", ValidationReport.empty())
        for name, value in values.items():
            self.write_attribute(name, value)

    # ── Schema ──

    @property
    def record_type(self) -> str:
        return type(self).__name__

    @classmethod
    def attribute_names(cls) -> list[str]:
        return [a.name for a in cls.attributes]

    @classmethod
    def schema(cls, name: str) -> Attribute:
        for attribute in cls.attributes:
            if attribute.name == name:
                return attribute
        raise UnknownAttributeError(cls.__name__, name)

    @classmethod
    def association(cls, name: str) -> Optional[Association]:
        for association in cls.belongs_to:
            if association.name == name:
                return association
        return None

    # ── Attribute access ──

    def read_attribute(self, name: str) -> Any:
        if name not in self._values:
            raise UnknownAttributeError(self.record_type, name)
        return self._values[name]

    def write_attribute(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise UnknownAttributeError(self.record_type, name)
        self._values[name] = value

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        values = self.__dict__.get("_values")
        if values is not None and name in values:
            return values[name]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._values:
            self._values[name] = value
        elif name == "id" or name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            raise UnknownAttributeError(self.record_type, name)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self._values}

    def persisted(self) -> bool:
        return self.id is not None

    # ── Validation ──

    @property
    def errors(self) -> ValidationReport:
        """Report from the most recent validation run (empty before the first)."""
        return self._errors

    def validate(self, context: Optional[ValidationContext] = None) -> ValidationReport:
        report = type(self).validations.validate(self, context)
        self._errors = report
        return report

    def valid(self, context: Optional[ValidationContext] = None) -> bool:
        return self.validate(context).valid

    def invalid(self, context: Optional[ValidationContext] = None) -> bool:
        return not self.valid(context)

    # ── Persistence ──

    def save(self, context: ValidationContext) -> bool:
        """Validate, then insert into ``context.store`` if valid.

        Returns False without touching the store when validation fails;
        otherwise returns the store's result. Store errors propagate.
        """
        report = self.validate(context)
        if not report.valid:
            logger.info(
                "record_rejected",
                record_type=self.record_type,
                total_errors=report.count,
                errors=report.full_messages,
            )
            return False

        saved = context.store.insert(self)
        if saved:
            logger.info("record_saved", record_type=self.record_type, record_id=self.id)
        return saved

    def save_strict(self, context: ValidationContext) -> bool:
        """Like ``save`` but raises ``RecordInvalidError`` when validation fails."""
        if not self.save(context):
            if not self.errors.valid:
                raise RecordInvalidError(self.record_type, self.errors)
            return False
        return True

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"<{self.record_type} id={self.id!r} {fields}>"
