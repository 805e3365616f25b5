"""Core exception hierarchy.

This module defines the error and warning types used to report step
construction and execution failures. Execution failures are never raised
out of a step: `Step.run` converts them into terminal outcomes, and the
runner formats them together with the step description.
"""

from os import linesep
from typing import TYPE_CHECKING, Any, TypedDict

from yaml import dump

if TYPE_CHECKING:
    from typing import Self

    from stepkit.step import Step

SNIPPET_ELLIPSIS = f'...{linesep}'
SNIPPET_INDENT = 2

FORMAT_REPLACER = '<runtime object>'
FORMAT_INDENT = 4

MAPPINGS = (dict,)
SCALARS = (str, bytes, int, float, bool)
SEQUENCES = (list, tuple, set)


class ErrorContext(TypedDict, total=False):
    """Container describing contextual information for error formatting.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Number of the step in its sequence.
    step_num: int | None
    #: Description of the failing step.
    description: str | None

    #: Underlying exception that triggered formatting.
    error: Exception | None

    #: Factory inputs of the failing step.
    element: Any


class ErrorFormatter:
    """Utility class for formatting step-related errors.

    Produces human-readable messages with the step location and a YAML
    snippet of the factory inputs that built the failing step.
    """

    @classmethod
    def format(cls, message: str, context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            context: Optional error context with location and data.

        Returns:
            A fully formatted error message suitable for display.
        """
        if not context:
            return message

        message += linesep
        message += cls.get_location_string(context, indent=FORMAT_INDENT)
        message += cls.get_snippet_string(context, indent=FORMAT_INDENT * 2)

        return message

    @classmethod
    def get_location_string(cls, context: ErrorContext, *,
                            indent: str | int | None = None) -> str:
        """Format the step location.

        Args:
            context: Error context containing location metadata.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted location string with the step number and
            description when available.
        """
        indent = cls._ensure_indent(indent)

        message = ''
        if (step_num := context.get('step_num')) is not None:
            step_num += 1
            message += f'{indent}on step {step_num}'
            if description := context.get('description'):
                message += f': {description}'
            message += linesep
        elif description := context.get('description'):
            message += f'{indent}in step: {description}{linesep}'

        return message

    @classmethod
    def get_snippet_string(cls, context: ErrorContext, *,
                           indent: str | int | None = None) -> str:
        """Generate a snippet of the failing step inputs.

        Args:
            context: Error context containing the step details.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted multi-line snippet string, or an empty string
            if no snippet data is available.
        """
        indent = cls._ensure_indent(indent)

        if element := context.get('element'):
            snippet = f'{indent}{SNIPPET_ELLIPSIS}'
            snippet += cls._make_yaml(element, indent)
            snippet += linesep
            return snippet

        return ''

    @classmethod
    def _filter_unsafe(cls, value: Any) -> Any:  # noqa: ANN401
        """Recursively sanitize values for safe YAML serialization.

        Classes are rendered by their qualified name; any other
        non-scalar and non-container object is replaced with a placeholder.

        Args:
            value: Arbitrary value to sanitize.

        Returns:
            A YAML-safe representation of the value.
        """
        if value is None or isinstance(value, SCALARS):
            return value

        if isinstance(value, type):
            return value.__qualname__

        if isinstance(value, MAPPINGS):
            return {
                f'{key}': cls._filter_unsafe(item)
                for key, item in value.items()
            }

        if isinstance(value, SEQUENCES):
            return [
                cls._filter_unsafe(item)
                for item in value
            ]

        return FORMAT_REPLACER

    @classmethod
    def _make_yaml(cls, value: Any, indent: str = '') -> str:  # noqa: ANN401
        """Serialize a value to an indented YAML string."""
        data = dump(
            cls._filter_unsafe(value),
            indent=SNIPPET_INDENT,
            sort_keys=False,
        )

        return cls._make_indent(data, indent)

    @staticmethod
    def _make_indent(value: str, indent: str) -> str:
        """Apply indentation to a multi-line string.

        Empty or whitespace-only lines are omitted.
        """
        if not indent:
            return value

        return linesep.join(
            f'{indent}{line}'
            for line in value.splitlines()
            if line.strip()
        )

    @staticmethod
    def _ensure_indent(indent: str | int | None = None) -> str:
        """Normalize indentation input."""
        if isinstance(indent, int) and indent > 0:
            return ' ' * indent

        if isinstance(indent, str):
            return indent

        return ''


class StepWarning(UserWarning):
    """Warning emitted for non-fatal step misuse.

    Used, for example, when a runner executes the same step twice.
    """


class StepError(Exception, ErrorFormatter):
    """Base exception for all stepkit errors.

    All custom exceptions raised by the library inherit from this class
    to allow unified error handling by callers.
    """

    def __init__(self, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            context: Error context containing optional step details.
        """
        self.message = message
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String represenatation."""
        return self.format(self.message, self.context)

    @classmethod
    def from_step(cls, step: 'Step', message: str, *,
                  step_num: int | None = None,
                  error: Exception | None = None) -> 'Self':
        """Create an error instance describing a step failure.

        Args:
            step: The failing step.
            message: Human-readable error message.
            step_num: Position of the step in its sequence.
            error: Optional underlying exception.

        Returns:
            An initialized error with the step location and details.
        """
        error_context = ErrorContext(
            step_num=step_num,
            description=step.describe(),
            error=error,
            element=step.details,
        )

        return cls(message, context=error_context)


class CapabilityError(StepError):
    """Error raised when a factory lacks a required collaborator.

    This is the only error raised at step construction time: it reports
    that a whole category of steps is unavailable, for example
    persistence steps without a persistence context.
    """


class UnresolvedReference(StepError):
    """A route, factory name or entity name is not registered."""


class ResourceUnavailable(StepError):
    """A fixture can not be found or read."""


class PropertyMismatch(StepError):
    """A property mapping key does not exist on the constructed object."""


class PersistenceFailure(StepError):
    """Saving the persistence context failed."""


class AmbiguousMethod(StepError):
    """A request method value does not denote exactly one HTTP method."""


class StepTimeout(StepError):
    """A step did not reach a terminal outcome within its bound."""
