# openzt

Tools for the file formats of Zoo Tycoon (2001):

- **INI-style configuration files** (`openzt.ini`). Keys may repeat, and every
  value is kept in file order.
- **ZTAF animation files** (`openzt.animation`). They are parsed into frames,
  lines and draw instructions. You can edit them and write them back to bytes.
- **A console client** (`openzt-console`). It sends commands to a running game
  over TCP.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Configuration files

```python
from openzt.ini import Ini

config = Ini()
config.read("""
[Section]
Name = Value1
Name = Value Two
Enabled = yes
""")

config.get("section", "name")                 # "Value Two": the last value wins
config.get_vec("section", "name")             # ["Value1", "Value Two"]
config.get_bool_coerce("section", "enabled")  # True

config.add("section", "name", "Four")
config.set("section", "enabled", "no")
print(config.writes())
```

How files are read:

- Section and key names are lower-cased unless you create the object with `Ini.new_cs()`.
- Comments begin with `;` or `#`. You can change this with `set_comment_symbols`.
- Keys and values are separated by `=` or `:`.
- A key with no delimiter is stored without a value (`None`).
- Keys outside any section go into the default section. It is named `default` and can be changed with `set_default_section`.

Reading and writing:

- `load` reads a file and replaces the current contents. `load_and_append` reads a file and merges it over them.
- `read` and `read_and_append` do the same from a string.
- `write` saves the configuration to a file. `writes` returns it as text.
- Both accept a `WriteOptions` from `openzt.inidefaults`, which sets spaces around delimiters and blank lines between sections.

Settings and errors:

- `IniDefault` holds the parser settings: default section, comment symbols, delimiters, boolean words and case sensitivity.
- `defaults()` returns the current settings. `load_defaults()` applies new ones.
- Parse errors and failed boolean conversions raise `IniError`.

To read typed values, pass a converter:

```python
config.read("[values]\nuint = 31415")
config.get_parse("values", "uint", int)   # 31415
```

The lower-level pieces can also be used on their own:

- `openzt.iniformat.parse_ini` and `render_ini` turn text into nested dicts and back.
- `openzt.inivalues.coerce_bool`, `coerce_bool_map` and `parse_value` convert single values.

## Animations

```python
from pathlib import Path
from openzt.animation import Animation

animation = Animation.parse(Path("N").read_bytes())
print(animation.palette_filename, animation.num_frames)

animation.duplicate_pixel_rows(0, 0, 1)   # repeat the first row of frame 0
animation.set_palette_filename("ui/sharedui/listbk/ltb.pal")
data = animation.to_bytes()
```

An animation is made of these dataclasses:

- `Header`
- `Frame`
- `Line`
- `DrawInstruction`

`Frame.calc_byte_size()` and `Line.calc_byte_size()` give the byte sizes as the format counts them. Truncated data and out-of-range edits raise `AnimationError`.

## Console

```
openzt-console [--host HOST] [--port PORT]
```

The console connects to the game's command server, which is `127.0.0.1:8080` by default. It then prompts for commands and prints each response from the server. Type `quit` to leave.

Use `openzt.console.run_session` to drive a session from your own socket and input lines.

The package contains only the client. It has no command server and does not attach to the game itself.