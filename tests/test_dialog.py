import pygame
import pytest

from mgui.base import MouseButton, MouseButtonPressed, MouseButtonReleased, Vector2
from mgui.dialog import DialogBox, DialogNode, DialogTree, DialogType


@pytest.fixture
def nodes():
    yes = DialogNode("You said yes", DialogType.OK)
    no = DialogNode("You said no", DialogType.OK)
    root = DialogNode("Continue?", DialogType.YES_NO, {"Yes": yes, "No": no})
    return root, yes, no


def click(box, button):
    center = (button.size.x / 2.0, button.size.y / 2.0)
    point = box.transform.transform_point(button.transform.transform_point(center))
    box.update_events(MouseButtonPressed(MouseButton.LEFT), point)
    box.update_events(MouseButtonReleased(MouseButton.LEFT), point)


def test_choose_follows_option(nodes):
    root, yes, _ = nodes
    tree = DialogTree(root)
    tree.choose("Yes")
    assert tree.current is yes
    assert tree.node_has_changed is True


def test_choose_unknown_label_is_ignored(nodes):
    root, _, _ = nodes
    tree = DialogTree(root)
    tree.choose("Maybe")
    assert tree.current is root
    assert tree.node_has_changed is False


def test_reset_node_changed_flag(nodes):
    root, _, no = nodes
    tree = DialogTree(root)
    tree.choose("No")
    tree.reset_node_changed_flag()
    assert tree.node_has_changed is False
    assert tree.current is no


def test_ok_node_has_single_ok_button(nodes):
    _, yes, _ = nodes
    box = DialogBox((0, 0), (400, 200))
    box.load_node(yes)
    assert [b.text for b in box.buttons] == ["Ok"]
    assert box.message == yes.message
    assert box.dialog_type is DialogType.OK


def test_option_buttons_are_sorted_by_label(nodes):
    root, _, _ = nodes
    box = DialogBox((0, 0), (400, 200))
    box.load_node(root)
    assert [b.text for b in box.buttons] == sorted(root.options)


def test_buttons_are_right_aligned_and_evenly_spaced():
    options = {label: DialogNode(label) for label in ("Next", "Previous", "Cancel")}
    box = DialogBox((0, 0), (500, 200))
    box.load_node(DialogNode("Pick", DialogType.NEXT_PREVIOUS, options))
    buttons = box.buttons
    for left, right in zip(buttons, buttons[1:]):
        assert right.position.x - (left.position.x + left.size.x) == pytest.approx(10.0)
        assert right.position.y == left.position.y
    last = buttons[-1]
    assert last.position.x + last.size.x == pytest.approx(box.size.x - 10.0)
    assert last.position.y + last.size.y == pytest.approx(box.size.y - 10.0)


def test_clicking_ok_reports_ok(nodes):
    _, yes, _ = nodes
    box = DialogBox((30, 40), (400, 200))
    box.load_node(yes)
    chosen = []
    box.set_choice_callback(chosen.append)
    click(box, box.buttons[0])
    assert chosen == ["Ok"]


def test_clicking_option_advances_tree(nodes):
    root, yes, _ = nodes
    tree = DialogTree(root)
    box = DialogBox((15, 25), (400, 200))
    box.set_choice_callback(tree.choose)
    box.load_node(tree.current)
    yes_button = next(b for b in box.buttons if b.text == "Yes")
    click(box, yes_button)
    assert tree.current is yes
    assert tree.node_has_changed is True


def test_click_outside_buttons_reports_nothing(nodes):
    root, _, _ = nodes
    box = DialogBox((0, 0), (400, 200))
    box.load_node(root)
    chosen = []
    box.set_choice_callback(chosen.append)
    point = Vector2(5, 5)
    box.update_events(MouseButtonPressed(MouseButton.LEFT), point)
    box.update_events(MouseButtonReleased(MouseButton.LEFT), point)
    assert chosen == []


def test_load_node_replaces_buttons(nodes):
    root, yes, _ = nodes
    box = DialogBox((0, 0), (400, 200))
    box.load_node(root)
    box.load_node(yes)
    assert [b.text for b in box.buttons] == ["Ok"]
    assert box.message == yes.message


def test_close_button_and_bounds():
    box = DialogBox((0, 0), (300, 150))
    assert box.close_button.text == "Close"
    assert box.local_bounds.contains((0, 0))
    assert box.local_bounds.contains((299, 149))
    assert not box.local_bounds.contains((310, 0))


def test_draw_fills_box_with_red(nodes):
    root, _, _ = nodes
    box = DialogBox((10, 10), (300, 200))
    box.load_node(root)
    surface = pygame.Surface((400, 300))
    box.draw(surface)
    assert tuple(surface.get_at((10 + 295, 10 + 5))) == (255, 0, 0, 255)