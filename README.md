# savemanager

A library for keeping track of save-data backups of Wii U and vWii titles.
It models titles and accounts, reads and writes the JSON metadata kept beside
each backup, stores per-console JSON configuration and exclusion lists,
lists and filters batch backup sets, discovers installed titles from a
storage tree, and holds the cursor and selection logic of the batch backup,
batch job and backup-set screens.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `savemanager.titles` – the `Title`, `Account` and `DataSourceInfo`
  dataclasses, the `JobType`, `BatchJobResult` and `FileNameStyle` enums,
  `sort_titles(titles, tsort, ascending)` (sorts in place by list order,
  short name, storage or storage then name, and renumbers index and
  duplicate links) and `str2uint(text, base)` (parses an unsigned 32-bit
  number, raising `ValueError` or `OverflowError`).
- `savemanager.metadata` – `Metadata`, the JSON file holding a backup's date,
  storage (`"USB"` or `"NAND"`), console serial id and tag. `read()` returns
  `False` when the file is missing or not JSON; `write()` and `set(date,
  is_usb)` write it; `describe()` and `simple_format()` give a one-line
  summary. `Metadata.in_directory(path)` points at `savemiiMeta.json` in a
  folder, and `Metadata.this_console_serial_id` is the serial id used by
  `set()` and by configuration file names.
- `savemanager.config` – `BaseConfig` and `GlobalConfig`. A configuration
  lives in `savemii-<serial>-<name>.json` inside a folder; `init()` creates
  the folder and a default file, `save()` and `read()` write and load it.
  `GlobalConfig` holds `language`, `always_apply_excludes`,
  `ask_for_backup_dir_conversion` and `dont_allow_undefined_profiles`.
  Failures raise `ConfigError`.
- `savemanager.excludes` – `TitleKey` and `ExcludesConfig`, the titles left
  out of batch backups. `get_config()` collects the titles not selected for
  backup, `apply_config()` deselects the excluded ones.
- `savemanager.backupsets` – `BackupSetList` reads every backup-set folder
  under a batch backup folder (creating missing metadata files), keeps a
  sorted, filterable view whose first row is always the root set (`ROOT_BS`),
  and offers `filter`, `sort`, `add`, tag setters and `sub_path`.
  `ValueRange` and `FilterValues` hold the year, month, serial id and tag
  values to filter on; `BackupSetFilterMenu` moves through and applies them.
- `savemanager.wiiuscan` – `parse_meta_xml(text)` returns a `MetaInfo` from a
  title's `meta.xml`; `scan_wiiu_titles(mlc_root, usb_root, installed)`
  builds the Wii U title list from save folders and installed `TitleKey`s,
  linking titles present on both devices as duplicates.
- `savemanager.wiiscan` – `decode_banner_units`, `read_banner(path)` and
  `scan_wii_titles(slccmpt_root)` list vWii titles and their banner names,
  skipping blacklisted system titles.
- `savemanager.batchbackup` – `BatchBackupMenu` and `BackupChoice`: the
  "back up all / Wii U / vWii" choices with title counts.
- `savemanager.batchjobmenu` – `BatchJobMenu` and `JobChoice`: the Wii U and
  vWii entries of the restore, wipe and copy-to-other-device menus, and what
  each leads to.
- `savemanager.listcursor` – `ListCursor`, cursor and scroll position of a
  list shown fourteen rows at a time.
- `savemanager.backupsetmenu` – `BackupSetMenu`: browsing, sorting,
  selecting, retagging and reloading backup sets.

## Example

```python
from pathlib import Path

from savemanager.backupsets import BackupSetList
from savemanager.metadata import Metadata

batch = Path("backups/batch")
folder = batch / "2024-01-01T120000"
folder.mkdir(parents=True, exist_ok=True)

meta = Metadata.in_directory(folder)
meta.set("2024-01-01T12:00:00", is_usb=True)
print(meta.describe())   # 2024-01-01T12:00:00, from USB | _WIIU_

sets = BackupSetList(batch)
sets.filter({"year": "2024"})
print([sets.at(i) for i in range(sets.entries_view)])
```

## What it does not do

The package has no command and no user interface: it does not draw screens
or read controller input, it only keeps the menu state that such screens
would use. It does not copy, restore, wipe or move save data itself, it does
not talk to a console's storage or account system (storage trees and
installed-title lists are passed in), and it has no screen for choosing the
options of a batch restore, wipe or profile copy.