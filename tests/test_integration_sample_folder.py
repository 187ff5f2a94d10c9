import shutil
from pathlib import Path

import pytest

SAMPLE_DIR = Path(__file__).resolve().parent / "data" / "sample"

EXPECTED_GETTING_STARTED = """\
[id="start"]
## Getting Started

This chapter explains the *basic* workflow.

[id="install"]
### Installation
Download the archive from link:http://example.com/dl[the download page] and unpack it.

image:images/setup.png[align="center"]

### Options
|========
| Option| Meaning
| -v| verbose [on\\|off]
|========

----
$ tool --run [fast] now
----
"""

EXPECTED_USAGE_NOTES = """\
## Usage
See <<start,Getting Started>> first.
[options="compact"]
* Run the tool
* Check *all* warnings

[options="compact"]
1. First
1. Second

"""


@pytest.mark.integration
def test_convert_sample_folder(tmp_path):
    """Converts tests/data/sample and checks every produced file."""
    from xdoc2asciidoc.config import load_settings
    from xdoc2asciidoc.pipeline import ConversionPipeline

    src = tmp_path / "xdoc"
    out = tmp_path / "asc"
    shutil.copytree(SAMPLE_DIR, src)
    out.mkdir()

    report = ConversionPipeline(load_settings()).run(src, out)

    assert [Path(f.source).name for f in report.files] == [
        "getting-started.xdoc",
        "usage notes.xdoc",
        "book.xdoc",
    ]
    assert (out / "getting_started.asc").read_text(encoding="utf-8") == EXPECTED_GETTING_STARTED
    assert (out / "usage_notes.asc").read_text(encoding="utf-8") == EXPECTED_USAGE_NOTES

    book = (out / "book.asc").read_text(encoding="utf-8")
    assert book.splitlines()[:2] == ["= Tool Manual", "A. Writer"]
    assert book.endswith(
        "include::getting_started.asc[]\n"
        "include::usage_notes.asc[]\n"
        "include::stunt_index.asc[]\n"
    )
    assert report.chapters == {"start": "getting_started.asc", "Usage": "usage_notes.asc"}
