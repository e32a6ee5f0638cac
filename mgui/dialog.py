"""Branching dialogs: a tree of message nodes and a box that shows one node."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from mgui.base import Color, FloatRect, GuiElement, Transform, Vector2
from mgui.button import Button, _default_font

_OUTLINE_THICKNESS = 1.0
_CHARACTER_SIZE = 24

_BUTTON_WIDTH = 100.0
_BUTTON_HEIGHT = 30.0
_BUTTON_SPACING = 10.0
_MARGIN = 10.0


class DialogType(Enum):
    OK = "ok"
    YES_NO = "yes_no"
    CONFIRM_CANCEL = "confirm_cancel"
    NEXT_PREVIOUS = "next_previous"


@dataclass
class DialogNode:
    """One step of a dialog: a message and the nodes each choice leads to."""

    message: str = ""
    type: DialogType = DialogType.OK
    options: Dict[str, "DialogNode"] = field(default_factory=dict)


class DialogTree:
    """Walks a tree of dialog nodes, one choice at a time."""

    def __init__(self, root: DialogNode) -> None:
        self._current = root
        self._node_changed = False

    def choose(self, label: str) -> None:
        """Follow the option named ``label``; unknown labels are ignored."""
        node = self._current.options.get(label)
        if node is not None:
            self._current = node
            self._node_changed = True

    @property
    def current(self) -> DialogNode:
        return self._current

    @property
    def node_has_changed(self) -> bool:
        return self._node_changed

    def reset_node_changed_flag(self) -> None:
        self._node_changed = False


class DialogBox(GuiElement):
    """A box showing a node's message with one button per choice."""

    def __init__(self, position, size) -> None:
        super().__init__(position)
        self.size = Vector2(*size)
        self.fill_color = Color.RED
        self.outline_color = Color.BLACK
        self.text_color = Color.BLACK
        self.character_size = _CHARACTER_SIZE

        self._message = ""
        self._buttons: list[Button] = []
        self._dialog_type = DialogType.OK
        self._choice_callback: Callable[[str], None] = lambda label: None

        self.close_button = Button((10.0, self.size.y - 35.0), (100.0, 25.0), "Close", 16)

    def update_events(self, event, mouse_pos) -> None:
        local_mouse = self.map_global_to_local(mouse_pos)
        self.close_button.update_events(event, local_mouse)
        for button in self._buttons:
            button.update_events(event, local_mouse)

    def update(self, mouse_pos) -> None:
        local_mouse = self.map_global_to_local(mouse_pos)
        self.close_button.update(local_mouse)
        for button in self._buttons:
            button.update(local_mouse)

    @property
    def local_bounds(self) -> FloatRect:
        return self._outlined_bounds(self.size, _OUTLINE_THICKNESS)

    def load_node(self, node: DialogNode) -> None:
        """Show the node's message and lay out its choice buttons, right-aligned."""
        self._dialog_type = node.type
        self._message = node.message
        self._buttons = []

        x = self.size.x - _MARGIN
        y = self.size.y - _BUTTON_HEIGHT - _MARGIN

        if node.type is DialogType.OK:
            x -= _BUTTON_WIDTH
            self._buttons.append(self._choice_button("Ok", x, y))
            return

        labels = sorted(node.options)
        total_width = len(labels) * (_BUTTON_WIDTH + _BUTTON_SPACING) - _BUTTON_SPACING
        x -= total_width
        for label in labels:
            self._buttons.append(self._choice_button(label, x, y))
            x += _BUTTON_WIDTH + _BUTTON_SPACING

    def set_choice_callback(self, callback: Callable[[str], None]) -> None:
        self._choice_callback = callback

    @property
    def message(self) -> str:
        return self._message

    @property
    def dialog_type(self) -> DialogType:
        return self._dialog_type

    @property
    def buttons(self) -> Tuple[Button, ...]:
        return tuple(self._buttons)

    def draw(self, surface, transform: Optional[Transform] = None) -> None:
        total = (transform or Transform()) @ self.transform
        self._draw_rectangle(surface, total, self.size, self.fill_color, self.outline_color, _OUTLINE_THICKNESS)
        self._draw_message(surface, total)
        self.close_button.draw(surface, total)
        for button in self._buttons:
            button.draw(surface, total)

    def _choice_button(self, label: str, x: float, y: float) -> Button:
        button = Button((x, y), (_BUTTON_WIDTH, _BUTTON_HEIGHT), label)
        button.on_pressed(lambda chosen=label: self._choice_callback(chosen))
        return button

    def _draw_message(self, surface, transform: Transform) -> None:
        if not self._message:
            return
        font = _default_font(self.character_size)
        line_height = font.get_linesize()
        for row, line in enumerate(self._message.split("\n")):
            width, height = font.size(line)
            center = (width / 2.0, row * line_height + height / 2.0)
            self._draw_text(surface, transform, font, line, self.text_color, center)