# mgui

A small widget set drawn with pygame, and a demo application built on a
stack of screens (states).

## Widgets

Every widget derives from `mgui.base.GuiElement`. It has a `position`,
`origin`, `rotation` and `scale` that together give its `transform`, and it
answers bounds queries: `local_bounds`, `global_bounds`, `contains(point)`,
`top`, `bottom`, `left` and `right`.

- `mgui.button.Button`: a clickable button whose `ButtonState` is normal,
  hover, pressed or disabled. Register a callback with `on_pressed`, change
  the label with `set_text` and disable it with `set_disabled`.
- `mgui.slider.Slider`: an integer slider with a draggable round knob. Read
  `value` and listen with `on_value_change`.
- `mgui.scroll.Scroll`: a vertical scroll bar with up and down buttons, a
  draggable indicator and mouse-wheel support. `value`, `min_value` and
  `max_value` can be set; `set_indicator_height_ratio` sizes the indicator.
- `mgui.listview.ListView`: a clipped, scrollable list that reuses a pool of
  at most 20 row views. It is fed by a `ListViewAdapter(data, font,
  item_height, view_factory)`, where `view_factory(font, height)` returns a
  `ListViewItem` that implements `update_with_data(data, index)`.
- `mgui.dialog`: `DialogNode` (a message, a `DialogType` and the nodes each
  option leads to), `DialogTree` to walk such nodes with `choose(label)`,
  and `DialogBox`, which shows one node with `load_node` and reports the
  clicked option to the callback given to `set_choice_callback`.
- `mgui.select.Select`: a plain outlined box that does not react to input.
- `mgui.example_item`: an `Example` product record and
  `ExampleListViewItem`, a list row that shows it.

Input comes in two steps: `update_events(event, mouse_pos)` for each event
and `update(mouse_pos)` once per frame. Events are the dataclasses in
`mgui.base`: `MouseButtonPressed`, `MouseButtonReleased`, `MouseMoved`,
`MouseWheelScrolled`, `Closed` and `Resized`. `draw(surface, transform)`
renders a widget onto a pygame surface under an optional parent
`Transform`; transforms compose with `a @ b`.

```python
from mgui.base import MouseButton, MouseButtonPressed, MouseButtonReleased, Vector2
from mgui.button import Button

clicks = []
button = Button(Vector2(10, 10), Vector2(100, 40), text="Go")
button.on_pressed(lambda: clicks.append(1))

inside = Vector2(20, 20)
button.update_events(MouseButtonPressed(MouseButton.LEFT, inside), inside)
button.update_events(MouseButtonReleased(MouseButton.LEFT, inside), inside)
assert clicks == [1]
```

## Demo application

```
pip install .
mgui --config-dir config
```

`mgui.game.main` opens a window and runs `Game`, which keeps a stack of
screens and drives the one on top. The configuration directory (default
`config`) may hold:

- `graphics.ini`: read by `GraphicsSettings.load_from_file`; the window
  title on the first line, then width, height, fullscreen flag (0 or 1),
  frame-rate limit, vertical-sync flag (0 or 1) and anti-aliasing level.
- `supported_keys.ini`: `name code` pairs, read by `load_supported_keys`.
- `mainmenustate_keybinds.ini`: `action key` pairs; each key must be listed
  in `supported_keys.ini`, or a `KeyError` is raised.
- `font.ttf`: used for text when present; otherwise pygame's default font.

Missing files are skipped and defaults are used.

The main menu (`mgui.main_menu.MainMenuState`) opens the settings screen
or quits. The settings screen (`mgui.settings_state.SettingsState`) shows a
sound slider with its percentage, a list of 20 sample products, a select
box, a scroll bar, crosshair lines following the mouse and the mouse
position in the corner; its Back button returns to the menu.

## What it does not do

- The main menu's "New Game" and "Dialog Box" buttons do nothing: there is
  no game screen and no dialog screen. The dialog widgets can be used on
  their own.
- The settings screen's "Apply" button does nothing, the sound slider does
  not change any volume, and settings are never written back to disk
  (`GraphicsSettings.save_to_file` exists but the demo does not call it).

## Tests

```
pip install .[test]
pytest
```