# drillrun

`drillrun` is a library of building blocks for a course of small
programming exercises: terminal output helpers, a writer for the
`rust-project.json` file that editors use to understand the exercise files,
and a set of worked lesson solutions written as ordinary Python.

## Installing

```
pip install drillrun
```

It has no dependencies beyond the standard library.

## Terminal output: `drillrun.ui`

- `style(text, color=None, bold=False)` wraps text in ANSI codes for one of
  the colours `black`, `red`, `green`, `yellow`, `blue`, `magenta`, `cyan`,
  `white` and/or bold. Codes are added only when colours are on: when
  `CLICOLOR_FORCE` is set to anything but `0`, or otherwise when stdout is a
  terminal and `CLICOLOR` is not `0`. An unknown colour raises `ValueError`.
- `warn(message)` and `success(message)` print a red or green status line.
  With `NO_EMOJI` set in the environment they use the plain markers `!` and
  `✓`.
- `Spinner(message)` animates on stderr while work runs (only when stderr is
  a terminal). Change its text with `set_message`, stop it with
  `finish_and_clear`, or use it as a context manager:

  ```python
  from drillrun.ui import Spinner

  with Spinner("Compiling...") as spinner:
      ...
      spinner.set_message("Running...")
  ```

- `ProgressBar(total)` keeps a position and a message (`set_position`,
  `inc`, `set_message`) and redraws itself on stderr when it is a terminal.
  `render()` returns the bar as plain text:

  ```python
  from drillrun.ui import ProgressBar

  bar = ProgressBar(4)
  bar.set_position(2)
  bar.set_message("(50.0 %)")
  bar.render()  # 'Progress: [##############...>-----...] 2/4 (50.0 %)'
  ```

## Editor project file: `drillrun.project`

`RustAnalyzerProject` collects one `Crate` (edition `2021`, `cfg` `["test"]`)
per `.rs` file and writes them as `rust-project.json`:

```python
from drillrun.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or derived from `rustc --print sysroot`
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`get_sysroot_src` uses `RUST_SRC_PATH` when it is set; otherwise it runs
`rustc --print sysroot` and appends `lib/rustlib/src/rust/library`.
`to_json()` returns the file's contents as a string.

## Worked lessons: `drillrun.lessons`

- `basics` – conditionals, small functions, optional values, strings and
  lists (`calculate_price_of_apples`, `bigger`, `maybe_icecream`,
  `trim_me`, `vec_map`, `average`, ...).
- `errors` – validation and parsing with exceptions
  (`generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger.new`, `parse_pos_nonzero`).
- `records` – dictionaries and lists of records (`default_fruit_basket`,
  `fill_fruit_basket`, `build_scores_table`, `Command`, `transformer`).
- `conversions` – text and components into records (`Person.parse`,
  `Person.from_text`, `Color.from_components`, `byte_counter`,
  `char_counter`, `num_sq`).
- `structs` – records with data and logic (`Order`, `Package`,
  `ReportCard`, `Rectangle`).
- `iterators` – `capitalize_first`, checked `divide`, `factorial` and
  progress counting.
- `traits` – message processing with `State`, `append_bar`, `Licensed`,
  cons lists, a copy-on-write `Cow` with `abs_all`, and a generic `Wrapper`.

```python
from drillrun.lessons.basics import calculate_price_of_apples
from drillrun.lessons.conversions import Color, Person
from drillrun.lessons.iterators import divide

calculate_price_of_apples(41)            # 41
Person.parse("Mark,20")                  # Person(name='Mark', age=20)
Person.from_text("Mark,twenty")          # Person(name='John', age=30)
Color.from_components((183, 65, 14))     # Color(red=183, green=65, blue=14)
divide(81, 6)                            # raises NotDivisibleError
```

## What this package does not do

There is no command-line program. The package does not read a course's
list of exercises, compile, run or test exercise files, check whether an
exercise is finished, watch files for changes, show hints or reset
exercises. It provides the output helpers, the project-file writer and the
lesson solutions described above.