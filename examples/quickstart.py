"""Quickstart example for droidstrings.

Reads two Android resource directories into a catalog, then writes the
French strings back out as a strings.xml document.
"""

import tempfile
from pathlib import Path

from droidstrings import (
    AndroidFormatter,
    Entry,
    Section,
    StringsCatalog,
    decode_value,
    encode_value,
)

# Example 1: Value escaping
print("=" * 50)
print("Example 1: Value Escaping")
print("=" * 50)

print(encode_value("  Tom & Jerry's %@ @home"))
# Output:   Tom &amp; Jerry\'s %s \@home

print(decode_value("Don\\'t forget %1$s"))
# Output: Don't forget %1$@

# Example 2: Reading a res/ directory
print("\n" + "=" * 50)
print("Example 2: Reading Resource Directories")
print("=" * 50)

formatter = AndroidFormatter()
catalog = StringsCatalog()

with tempfile.TemporaryDirectory() as tmpdir:
    res = Path(tmpdir) / "res"
    for directory, value in (("values", "Save"), ("values-fr", "Enregistrer")):
        (res / directory).mkdir(parents=True)
        (res / directory / formatter.default_file_name).write_text(
            "<resources>\n"
            "\t<!-- Save button label -->\n"
            f'\t<string name="save">{value}</string>\n'
            "</resources>\n",
            encoding="utf-8",
        )

    print(formatter.can_handle_directory(res))
    # Output: True

    for path in sorted(res.glob(f"*/{formatter.default_file_name}")):
        language = formatter.determine_language_given_path(path, "en")
        if language is None:
            continue
        formatter.read_file(path, language, catalog)

print(catalog.languages)
# Output: ('en', 'fr')
print(catalog.translation_for("save", "fr"), "/", catalog.comment_for("save"))
# Output: Enregistrer / Save button label

# Example 3: Writing a document
print("\n" + "=" * 50)
print("Example 3: Writing strings.xml")
print("=" * 50)

print(formatter.output_path_for_language("fr"))
# Output: values-fr

sections = [
    *catalog.sections_for("fr"),
    Section("Errors", [Entry("offline", "Pas de connexion", "Shown when -- offline")]),
]
print(formatter.format_file("fr", sections))
