"""Exception hierarchy for command-line parsing, each carrying an exit code."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import ClassVar


class ExitCodes(IntEnum):
    """Exit codes attached to every error."""

    SUCCESS = 0
    INCORRECT_CONSTRUCTION = 100
    BAD_NAME_STRING = 101
    OPTION_ALREADY_ADDED = 102
    FILE_ERROR = 103
    CONVERSION_ERROR = 104
    VALIDATION_ERROR = 105
    REQUIRED_ERROR = 106
    REQUIRES_ERROR = 107
    EXCLUDES_ERROR = 108
    EXTRAS_ERROR = 109
    CONFIG_ERROR = 110
    INVALID_ERROR = 111
    HORRIBLE_ERROR = 112
    OPTION_NOT_FOUND = 113
    ARGUMENT_MISMATCH = 114
    BASE_CLASS = 127


class Error(Exception):
    """Base of all errors; holds a message, a name and an exit code."""

    default_message: ClassVar[str] = ""
    default_exit_code: ClassVar[int] = ExitCodes.BASE_CLASS
    error_name: ClassVar[str] = "Error"

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if "error_name" not in cls.__dict__:
            cls.error_name = cls.__name__

    def __init__(self, message: str | None = None, exit_code: int | None = None) -> None:
        if message is None:
            message = self.default_message
        if exit_code is None:
            exit_code = self.default_exit_code
        super().__init__(message)
        self.message = message
        self.exit_code = int(exit_code)

    @property
    def name(self) -> str:
        """The error's name, as reported to the user."""
        return self.error_name


class ConstructionError(Error):
    """Raised while building a parser, not while parsing."""


class IncorrectConstruction(ConstructionError):
    """An option was set up with conflicting settings."""

    default_exit_code = ExitCodes.INCORRECT_CONSTRUCTION

    @classmethod
    def positional_flag(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: Flags cannot be positional")

    @classmethod
    def set0_opt(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: Cannot set 0 expected, use a flag instead")

    @classmethod
    def set_flag(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: Cannot set an expected number for flags")

    @classmethod
    def change_not_vector(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: You can only change the expected arguments for vectors")

    @classmethod
    def after_multi_opt(cls, name: str) -> IncorrectConstruction:
        return cls(
            f"{name}: You can't change expected arguments after you've changed the multi option policy!"
        )

    @classmethod
    def missing_option(cls, name: str) -> IncorrectConstruction:
        return cls(f"Option {name} is not defined")

    @classmethod
    def multi_option_policy(cls, name: str) -> IncorrectConstruction:
        return cls(f"{name}: multi_option_policy only works for flags and exact value options")


class BadNameString(ConstructionError):
    """An option name could not be understood."""

    default_exit_code = ExitCodes.BAD_NAME_STRING

    @classmethod
    def one_char_name(cls, name: str) -> BadNameString:
        return cls(f"Invalid one char name: {name}")

    @classmethod
    def bad_long_name(cls, name: str) -> BadNameString:
        return cls(f"Bad long name: {name}")

    @classmethod
    def dashes_only(cls, name: str) -> BadNameString:
        return cls(f"Must have a name, not just dashes: {name}")

    @classmethod
    def multi_positional_names(cls, name: str) -> BadNameString:
        return cls(f"Only one positional name allowed, remove: {name}")


class OptionAlreadyAdded(ConstructionError):
    """An option of the same name already exists."""

    default_exit_code = ExitCodes.OPTION_ALREADY_ADDED

    @classmethod
    def already_added(cls, name: str) -> OptionAlreadyAdded:
        return cls(f"{name} is already added")

    @classmethod
    def requires(cls, name: str, other: str) -> OptionAlreadyAdded:
        return cls(f"{name} requires {other}")

    @classmethod
    def excludes(cls, name: str, other: str) -> OptionAlreadyAdded:
        return cls(f"{name} excludes {other}")


class ParseError(Error):
    """Anything that can go wrong while parsing."""


class Success(ParseError):
    """Parsing finished and the program should exit successfully."""

    default_message = "Successfully completed, should be caught and quit"
    default_exit_code = ExitCodes.SUCCESS


class CallForHelp(ParseError):
    """Help was requested on the command line."""

    default_message = "This should be caught in your main function, see examples"
    default_exit_code = ExitCodes.SUCCESS


class CallForAllHelp(ParseError):
    """Expanded help was requested on the command line."""

    default_message = "This should be caught in your main function, see examples"
    default_exit_code = ExitCodes.SUCCESS


class CLIRuntimeError(ParseError):
    """Exit quietly with a chosen exit code."""

    error_name = "RuntimeError"
    default_message = "Runtime error"
    default_exit_code = 1


class FileError(ParseError):
    """A configuration file could not be read."""

    default_exit_code = ExitCodes.FILE_ERROR

    @classmethod
    def missing(cls, name: str) -> FileError:
        return cls(f"{name} was not readable (missing?)")


class ConversionError(ParseError):
    """A value could not be converted."""

    default_exit_code = ExitCodes.CONVERSION_ERROR

    @classmethod
    def not_allowed(cls, member: str, name: str) -> ConversionError:
        return cls(f"The value {member} is not an allowed value for {name}")

    @classmethod
    def could_not_convert(cls, name: str, results: Iterable[str]) -> ConversionError:
        return cls(f"Could not convert: {name} = {','.join(results)}")

    @classmethod
    def too_many_inputs_flag(cls, name: str) -> ConversionError:
        return cls(f"{name}: too many inputs for a flag")

    @classmethod
    def true_false(cls, name: str) -> ConversionError:
        return cls(f"{name}: Should be true/false or a number")


class ValidationError(ParseError):
    """A value failed validation."""

    default_exit_code = ExitCodes.VALIDATION_ERROR

    @classmethod
    def for_option(cls, name: str, message: str) -> ValidationError:
        return cls(f"{name}: {message}")


class RequiredError(ParseError):
    """A required option or subcommand is missing."""

    default_exit_code = ExitCodes.REQUIRED_ERROR

    @classmethod
    def missing(cls, name: str) -> RequiredError:
        return cls(f"{name} is required")

    @classmethod
    def subcommand(cls, min_subcom: int) -> RequiredError:
        if min_subcom == 1:
            return cls.missing("A subcommand")
        return cls(f"Requires at least {min_subcom} subcommands")

    @classmethod
    def option(cls, min_option: int, max_option: int, used: int, option_list: str) -> RequiredError:
        if min_option == 1 and max_option == 1 and used == 0:
            return cls.missing(f"Exactly 1 option from [{option_list}]")
        if min_option == 1 and max_option == 1 and used > 1:
            return cls(f"Exactly 1 option from [{option_list}] is required and {used} were given")
        if min_option == 1 and used == 0:
            return cls.missing(f"At least 1 option from [{option_list}]")
        if used < min_option:
            return cls(
                f"Requires at least {min_option} options used and only {used}"
                f"were given from [{option_list}]"
            )
        if max_option == 1:
            return cls(f"Requires at most 1 options be given from [{option_list}]")
        return cls(
            f"Requires at most {max_option} options be used and {used}"
            f"were given from [{option_list}]"
        )


class ArgumentMismatch(ParseError):
    """The wrong number of arguments was received."""

    default_exit_code = ExitCodes.ARGUMENT_MISMATCH

    @classmethod
    def count(cls, name: str, expected: int, received: int) -> ArgumentMismatch:
        if expected > 0:
            return cls(f"Expected exactly {expected} arguments to {name}, got {received}")
        return cls(f"Expected at least {-expected} arguments to {name}, got {received}")

    @classmethod
    def at_least(cls, name: str, num: int) -> ArgumentMismatch:
        return cls(f"{name}: At least {num} required")

    @classmethod
    def typed_at_least(cls, name: str, num: int, type_name: str) -> ArgumentMismatch:
        return cls(f"{name}: {num} required {type_name} missing")

    @classmethod
    def flag_override(cls, name: str) -> ArgumentMismatch:
        return cls(f"{name} was given a disallowed flag override")


class RequiresError(ParseError):
    """An option that another one needs is missing."""

    default_exit_code = ExitCodes.REQUIRES_ERROR

    @classmethod
    def between(cls, curname: str, subname: str) -> RequiresError:
        return cls(f"{curname} requires {subname}")


class ExcludesError(ParseError):
    """Two options that exclude each other were both given."""

    default_exit_code = ExitCodes.EXCLUDES_ERROR

    @classmethod
    def between(cls, curname: str, subname: str) -> ExcludesError:
        return cls(f"{curname} excludes {subname}")


class ExtrasError(ParseError):
    """Arguments were left over after parsing."""

    default_exit_code = ExitCodes.EXTRAS_ERROR

    @classmethod
    def from_args(cls, args: Iterable[str]) -> ExtrasError:
        items = list(args)
        prefix = (
            "The following arguments were not expected: "
            if len(items) > 1
            else "The following argument was not expected: "
        )
        return cls(prefix + " ".join(reversed(items)))


class ConfigError(ParseError):
    """A configuration file held something that could not be used."""

    default_exit_code = ExitCodes.CONFIG_ERROR

    @classmethod
    def extras(cls, item: str) -> ConfigError:
        return cls(f"INI was not able to parse {item}")

    @classmethod
    def not_configurable(cls, item: str) -> ConfigError:
        return cls(f"{item}: This option is not allowed in a configuration file")


class InvalidError(ParseError):
    """The parser set-up is invalid, found before parsing."""

    default_exit_code = ExitCodes.INVALID_ERROR

    @classmethod
    def too_many_positionals(cls, name: str) -> InvalidError:
        return cls(f"{name}: Too many positional arguments with unlimited expected args")


class HorribleError(ParseError):
    """An internal consistency check failed."""

    default_exit_code = ExitCodes.HORRIBLE_ERROR


class OptionNotFound(Error):
    """An option asked for by name does not exist."""

    default_exit_code = ExitCodes.OPTION_NOT_FOUND

    @classmethod
    def missing(cls, name: str) -> OptionNotFound:
        return cls(f"{name} not found")