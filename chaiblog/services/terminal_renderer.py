import io
from typing import Protocol

from rich.console import Console, ConsoleOptions, RenderResult
from rich.emoji import Emoji
from rich.markdown import ImageItem, Markdown
from rich.text import Text

IMAGE_PLACEHOLDER = "Why image are not loaded in terminal :)"


class MarkdownRenderer(Protocol):
    def render(self, markdown: str) -> str: ...


class PlaceholderImage(ImageItem):
    """Terminals can't show images, so print the alt text behind a placeholder."""

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        yield Text(f"{IMAGE_PLACEHOLDER} {self.text.plain}".rstrip())


class TerminalMarkdown(Markdown):
    elements = {**Markdown.elements, "image": PlaceholderImage}

    def __init__(self, markup: str, **kwargs):
        super().__init__(markup, **kwargs)
        # :shortcode: emoji in prose only, code spans and fences stay verbatim
        for token in self.parsed:
            for child in token.children or []:
                if child.type == "text":
                    child.content = Emoji.replace(child.content)


class RichMarkdownRenderer:
    """
    Render markdown to ANSI-decorated text at a fixed terminal width.
    """

    def __init__(self, width: int = 100):
        self.width = width

    def render(self, markdown: str) -> str:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=self.width,
            force_terminal=True,
            color_system="standard",
            legacy_windows=False,
        )
        console.print(TerminalMarkdown(markdown, hyperlinks=False))
        return buffer.getvalue()
