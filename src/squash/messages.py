# ABOUTME: FinalMessage builder for multi-part error reports (title, details, hints)
# ABOUTME: Renders reports in standard or accessible presentation mode
"""Final error messages shown to the user before exiting"""

from dataclasses import dataclass, replace

from squash.accessibility import is_accessible
from squash.colors import color_enabled, green, red, yellow


@dataclass(frozen=True)
class FinalMessage:
    """
    Pretty final error message for end users.

    Built by chaining::

        FinalMessage.with_title("Cannot read input").detail("File is empty").hint("Check the path")

    Every call returns a new value, so a partially built message can be reused.
    """

    # One line, shown after the [ERROR] tag
    title: str = ""
    # Bulleted list, yellow
    details: tuple[str, ...] = ()
    # Shown last, suggestions for working around the error
    hints: tuple[str, ...] = ()

    @classmethod
    def with_title(cls, title) -> "FinalMessage":
        return cls(title=str(title))

    def detail(self, detail) -> "FinalMessage":
        """Add one detail line, can be called multiple times"""
        return replace(self, details=(*self.details, str(detail)))

    def hint(self, hint) -> "FinalMessage":
        """Add one hint line, can be called multiple times"""
        return replace(self, hints=(*self.hints, str(hint)))

    def render(self, accessible: bool | None = None, color: bool | None = None) -> str:
        return render_message(self, accessible=accessible, color=color)

    def __str__(self):
        return render_message(self, color=False)


def render_message(
    message: FinalMessage,
    accessible: bool | None = None,
    color: bool | None = None,
) -> str:
    """
    Render a FinalMessage as display text.

    Args:
        message: Message to render
        accessible: Accessible mode; None reads the process-wide flag
        color: Use ANSI colour; None detects it for stderr

    Returns:
        Rendered text without a trailing newline
    """
    if accessible is None:
        accessible = is_accessible()
    if color is None:
        color = color_enabled()

    # Square brackets are suppressed in accessible mode
    if accessible:
        lines = [f"{red('ERROR', color)}: {message.title}"]
    else:
        lines = [f"{red('[ERROR]', color)} {message.title}"]

    for detail in message.details:
        lines.append(f" - {yellow(detail, color)}")

    if message.hints:
        lines.append("")
        # Announce "hints" only once for text-to-speech and braille displays
        if accessible:
            lines.append(green("hints:", color))
            lines.extend(message.hints)
        else:
            for hint in message.hints:
                lines.append(f"{green('hint:', color)} {hint}")

    return "\n".join(lines)
