"""Exceptions and warnings raised by contribwriter."""


class ContribWriterError(Exception):
    """Base class for every error the CLI reports and exits non-zero on."""


class ConfigurationError(ContribWriterError):
    """The requested pattern cannot be placed or configured as given."""


class MissingConfiguration(ContribWriterError):
    """No snapshot exists for a command that needs one."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"No configuration found at {path}. Run initial setup first "
            f"(create <message> or setup)."
        )


class ExternalCommandFailure(ContribWriterError):
    """A git invocation exited non-zero."""

    def __init__(self, cmd, returncode, output=""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.output = output
        detail = output.strip()
        msg = f"Command failed with code {returncode}: {' '.join(self.cmd)}"
        if detail:
            msg += f"\n{detail}"
        super().__init__(msg)


class UnsupportedCharacterWarning(UserWarning):
    """A message character has no glyph and was skipped."""

    def __init__(self, char):
        self.char = char
        super().__init__(f"Character {char!r} not supported, skipping...")
