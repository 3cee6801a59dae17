# preselect

`preselect` walks a directory tree and reads every file whose extension it
knows. It splits each file into entries and passes every entry's value to a
processor. The processor decides whether to keep the entry. For example,
`CSVProcessor` compares the entry with a list of keywords through a similarity
metric that you supply.

## Readers

Two data sources are included in `preselect.loaders`. Both are iterators of
`preselect.scanner.Entry` objects. Each entry has a `value` and a `path` tuple.
Both readers accept a text stream, a binary stream (decoded as UTF-8), a `str`,
`bytes` or `None`. `None` is read as empty input.

- `Loader(reader, delimiters)` splits text into tokens. It splits on the given
  delimiter characters, or on space and newline when none are given. An
  entry's `path` is `(token number, byte offset of the token's start, line
  number)`, all as strings.
- `CSVLoader(reader, delim, quote)` yields one cell at a time. The delimiter
  defaults to `,` and the quote character to `"`. Inside quotes, a doubled
  quote stands for a single quote character. Rows may end in `\n`, `\r\n` or
  `\r`. An entry's `path` is `(row, column)`, both starting at 1.

```python
import io

from preselect.loaders import Loader

for entry in Loader(io.StringIO("hello world\nnext line")):
    print(entry.value, entry.path)
# hello ('1', '0', '1')
# world ('2', '6', '1')
# next ('3', '12', '2')
# line ('4', '17', '2')
```

## Processors

A processor is a subclass of `preselect.processor.Processor`. Its
`process(entry)` method returns `True` when the entry was kept.

`ProcessorConfig(metric, keywords, threshold)` holds three things:

- `metric`: a function `(a, b) -> float`.
- `keywords`: the keywords to compare entries with.
- `threshold`: the score an entry must reach.

`preselect.csv_processor.CSVProcessor(config, file_path)` appends the file at
`file_path`. An entry is kept when `metric(entry, keyword) >= threshold` for
any keyword. Each kept entry is written as a one-field CSV row, and the file
is flushed after every write. `CSVProcessor` is a context manager, and
`close()` closes the file.

## Scanning a directory

`preselect.directory.scan_directory(root, ext_map, proc)` walks `root`
recursively. `ext_map` maps an extension (lower case, without the dot) to a
factory that takes an open binary file and returns a data source. Extensions
of file names are compared case-insensitively.

Each matching file is read in its own thread. All entries go to a single
consumer that calls `proc.process`, so entries from different files may
arrive interleaved.

How errors are handled:

| Error | What happens |
| --- | --- |
| A reader fails | That file's scan ends without an error. |
| The processor raises | The first such error is raised again once all files are done. |
| Walking the tree fails | The error is raised. |

`preselect.app.App(AppConfig(root, ext_map, processor)).run()` adds defaults,
then calls `scan_directory`:

- An empty `root` means `.`.
- `txt` is read with `Loader` and `csv` with `CSVLoader`, unless `ext_map`
  says otherwise.
- A missing processor keeps nothing.

```python
from difflib import SequenceMatcher

from preselect.app import App, AppConfig
from preselect.csv_processor import CSVProcessor
from preselect.processor import ProcessorConfig


def ratio(a: str, b: str) -> float:
    return SequenceMatcher(None, a.lower(), b.lower()).ratio()


config = ProcessorConfig(metric=ratio, keywords=["invoice", "receipt"], threshold=0.8)
with CSVProcessor(config, "kept.csv") as processor:
    App(AppConfig(root="documents", processor=processor)).run()
```

## Command line

Install the package:

```
pip install .
```

Then run:

```
preselect -dir path/to/files
```

Options:

- `-dir DIR` (or `--dir`): the directory to scan. The default is `.`.
- `-ext SPEC` (or `--ext`): configure an extension. The option may be given
  more than once. The form is `ext=DELIMS[:QUOTE]`.
  - For `csv`, the first character of `DELIMS` is the cell delimiter and
    `QUOTE` is the quote character.
  - For any other extension, files are split on every character of
    `DELIMS`.
  - Empty settings fall back to the defaults.

For example, `-ext txt=" ,"` splits `.txt` files on spaces and commas.
`-ext csv=";:'"` reads `.csv` files with `;` as the delimiter and `'` as the
quote character.

The command exits with status 0 on success. On an error it prints
`preselect: <message>` to standard error and exits with status 1.

## What it does not do

The package has no similarity metric of its own. You supply one through
`ProcessorConfig`.

The `preselect` command has no options for keywords, a threshold or an output
file. It runs without a processor, so it reads the files and keeps nothing.
To keep entries, use the library with a processor such as `CSVProcessor`.