"""Interactive multi-select prompt built on prompt_toolkit."""

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI, FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style as PromptStyle
from prompt_toolkit.widgets import CheckboxList


def build_prompt(message: str, options: list[str], page_size: int) -> Application[list[int]]:
    """Build the multi-select application without running it.

    The option list is the second child of the root container and is
    limited to ``page_size`` rows.
    """
    checkbox = CheckboxList(values=[(index, ANSI(option)) for index, option in enumerate(options)])
    # Space toggles, enter submits.
    checkbox.control.key_bindings.remove("enter")

    bindings = KeyBindings()

    @bindings.add("enter")
    def _(event: KeyPressEvent) -> None:
        event.app.exit(result=sorted(checkbox.current_values))

    @bindings.add("c-c")
    @bindings.add("c-d")
    def _(event: KeyPressEvent) -> None:
        event.app.exit(exception=KeyboardInterrupt)

    question = FormattedText(
        [
            ("class:question", message),
            ("class:hint", "  (space to toggle, enter to confirm)"),
        ]
    )
    layout = Layout(
        HSplit(
            [
                Window(FormattedTextControl(question), height=1),
                HSplit([checkbox], height=min(page_size, len(options)) or 1),
            ]
        ),
        focused_element=checkbox,
    )

    return Application(
        layout=layout,
        key_bindings=bindings,
        style=PromptStyle.from_dict({"question": "bold", "hint": "fg:gray"}),
        full_screen=False,
    )


def multiselect(message: str, options: list[str], page_size: int) -> list[int]:
    """Let the operator tick any number of options.

    Options may contain ANSI escape sequences. At most ``page_size`` rows
    are visible at once; the list scrolls with the cursor.

    Args:
        message: Question shown above the list
        options: Pre-rendered option strings
        page_size: Number of visible rows

    Returns:
        Indices of the ticked options in ascending order

    Raises:
        KeyboardInterrupt: If the operator cancels with Ctrl-C or Ctrl-D
    """
    return build_prompt(message, options, page_size).run()
