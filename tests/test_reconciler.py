from mdtoc.markers.handler import MarkerHandler
from mdtoc.models.configs import TOCOptions
from mdtoc.orchestration.reconciler import block_growth, plan_section_tocs
from mdtoc.parsing.markdown import HeadingParser, split_lines
from mdtoc.parsing.sections import split_sections

NUMBERED = TOCOptions(line_number=True)


def _plan(clean: str, options: TOCOptions = NUMBERED):
    sections = split_sections(HeadingParser(options).parse_all_headers(clean))
    return plan_section_tocs(sections, split_lines(clean), options)


def test_block_growth_accounts_for_absorbed_blank():
    assert block_growth(["# A", "## a"], 0, "- [a](#a)") == 7
    assert block_growth(["# A", "", "## a"], 0, "- [a](#a)") == 6
    assert block_growth(["# A", "## a"], 0, "") == 0


def test_plan_shifts_by_previous_and_current_blocks():
    clean = "# A\n## a1\n# B\n## b1\n"

    planned = _plan(clean)

    assert [(item.h1_line, item.toc) for item in planned] == [
        (0, "- [a1](#a1) `L9-L9`"),
        (2, "- [b1](#b1) `L18-L18`"),
    ]


def test_planned_line_numbers_match_inserted_document():
    clean = "# Intro\n\nText.\n\n## Setup\n\nSteps.\n\n### Detail\n\n# Usage\n## Run\nMore.\n## Stop\n"

    planned = _plan(clean)
    final = MarkerHandler().insert_section_tocs(clean, planned)

    sub_headers = [h for h in HeadingParser(NUMBERED).parse_all_headers(final) if h.level > 1]
    rendered = "\n".join(item.toc for item in planned)
    assert len(sub_headers) == 4
    for heading in sub_headers:
        assert f"[{heading.text}](#{heading.anchor_link}) `L{heading.line}-L{heading.end_line}`" in rendered


def test_plan_skips_sections_without_sub_headings():
    planned = _plan("# Lonely\ntext\n# Busy\n## Child\n")

    assert len(planned) == 1
    assert planned[0].h1_line == 2
    assert planned[0].toc == "- [Child](#child) `L11-L11`"


def test_plan_without_line_numbers_renders_plain_lists():
    planned = _plan("# A\n## a1\n", TOCOptions())

    assert planned[0].toc == "- [a1](#a1)"


def test_block_growth_subtracts_the_whole_blank_run():
    assert block_growth(["# A", "", "", "## a"], 0, "- [a](#a)") == 5
    assert block_growth(["# A", ""], 0, "- [a](#a)") == 7
