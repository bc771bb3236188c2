# fileclassifier

Count the files in a directory by extension, and preview how files could be
sorted into folders by type, by size or by modification time.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
fileclassifier [PATH] [--view {type,size,time}]...
```

`PATH` defaults to the current directory. The command looks at the readable
files directly inside it, hidden ones included, and does not descend into
subdirectories. It prints:

- the path, the total number of files and the number of distinct extensions;
- the heading `文件类型占比` and one line per type with its file count and its
  share in percent. Types with fewer files than 5% of the total (rounded down)
  are merged into a single `其他` (other) entry.

Each `--view` option (it may be repeated) also prints a classification preview:
`type`, `size` or `time`. A preview lists every group with its title, its
suggested target folder name and each file with its selection state. These
previews are built from the example data in `fileclassifier.samples`, not
from the scanned directory.

If `PATH` does not exist or is not a directory, an error is printed to
standard error and the exit status is 1.

## Library use

### Directory statistics

```python
from fileclassifier.statistics import scan_directory

stats = scan_directory("/some/folder")
print(stats.summary())
for piece in stats.slices:
    print(piece.label, round(piece.percentage, 1))
```

- `scan_directory(path)` returns a `FileStatistics` with `path`, `total` and
  `type_counts` (extension to count, ordered by extension; files without an
  extension count under `""`). It raises `FileNotFoundError` or
  `NotADirectoryError`.
- `FileStatistics.grouped` and `FileStatistics.slices` give the merged counts
  and the chart slices; `summary()` gives the two summary lines.
- `group_file_types(counts, total)` merges rare types into `其他` and orders
  the result by name.
- `pie_slices(grouped, total)` returns `PieSlice` objects with `file_type`,
  `count`, `percentage` and a `label` such as `txt(3个)`.

### Previews

A preview holds groups of files under a category name. Each group suggests a
target folder name, and every file starts out selected.

```python
from fileclassifier.preview import Preview
from fileclassifier.samples import sample_type_data

preview = Preview()
preview.set_file_data(sample_type_data())
group = preview.groups[0]
group.toggle(group.files[0])
print(group.title(), group.folder_name, group.selected_files())
preview.select_all()
```

- `fileclassifier.preview`: `Preview`, `FileTypeGroup`, `FileItem` and
  `default_folder_name(file_type)`.
- `fileclassifier.sizepreview`: `SizePreview`, `FileSizeGroup`,
  `FileSizeItem`, `FileInfo`, `format_file_size(size)` (for example
  `512 B`, `1.00 KB`) and `default_size_folder_name(size_range)`.
- `fileclassifier.timepreview`: `TimePreview`, `FileTimeGroup`,
  `FileTimeItem`, `FileTimeInfo`, `format_modified_time(modified, today)`
  (today and yesterday as `今天 HH:MM` / `昨天 HH:MM`, the same year as
  `MM-DD HH:MM`, older as `YYYY-MM-DD`) and
  `default_time_folder_name(time_range)`.
- `fileclassifier.samples`: example data from `sample_type_data()`,
  `sample_size_data()` and `sample_time_data(now)`.

`set_file_data(...)` replaces the groups with one per category, ordered by
category name; `select_all()` and `deselect_all()` act on every group, and
`min_width` gives the width needed to lay the groups side by side.

Every group has `title()`, `selected_files()`, `select_all()`,
`deselect_all()`, `toggle(file_name)` and `describe(file_name)`, plus an
editable `folder_name` whose surrounding whitespace is stripped when read.
`toggle` and `describe` raise `KeyError` for a name not in the group.
`FileTypeGroup.selected_files()` returns names in sorted order; the size and
time groups return the selected `FileInfo` / `FileTimeInfo` records in the
order given.

## What it does not do

- It does not move, copy or otherwise change any files: the previews only
  record which files are selected and which folder name is suggested.
- There is no graphical interface and no chart drawing; output is text.
- The size and time previews are not computed from a real directory; the
  command shows them with the example data only.