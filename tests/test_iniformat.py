import pytest

from openzt.inidefaults import IniDefault, WriteOptions
from openzt.iniformat import LINE_ENDING, IniError, parse_ini, render_ini


def test_documented_example():
    result = parse_ini("[2000s]\n    2020 = bad")
    assert result["2000s"]["2020"] == ["bad"]


def test_sectionless_keys_go_to_default_section():
    result = parse_ini("alpha=one\n[other]\nbeta=two")
    assert list(result) == ["default", "other"]
    assert result["default"]["alpha"] == ["one"]


def test_custom_default_section():
    result = parse_ini("alpha=one", IniDefault(default_section="hidden"))
    assert result == {"hidden": {"alpha": ["one"]}}


def test_case_insensitive_lowercases_sections_and_keys():
    result = parse_ini("[HiddenPlace]\nKFC = Orega")
    assert result == {"hiddenplace": {"kfc": ["Orega"]}}


def test_case_sensitive_keeps_case():
    result = parse_ini("[HiddenPlace]\nKFC = Orega", IniDefault(case_sensitive=True))
    assert result == {"HiddenPlace": {"KFC": ["Orega"]}}


def test_comments_are_stripped():
    text = ";comment\n#another\nkey=value ;trailing\n"
    assert parse_ini(text) == {"default": {"key": ["value"]}}


def test_custom_comment_symbols():
    text = "key=a#b\n!ignored"
    result = parse_ini(text, IniDefault(comment_symbols=["!"]))
    assert result == {"default": {"key": ["a#b"]}}


def test_colon_delimiter_and_first_delimiter_wins():
    result = parse_ini("a : b\nc=d:e")
    assert result["default"]["a"] == ["b"]
    assert result["default"]["c"] == ["d:e"]


def test_duplicate_keys_accumulate_in_order():
    result = parse_ini("[Section]\nName=Value1\nName = Value Two\nname=Four")
    assert result["section"]["name"] == ["Value1", "Value Two", "Four"]


def test_valueless_and_empty_values():
    result = parse_ini("[s]\nflag\nempty =")
    assert result["s"]["flag"] is None
    assert result["s"]["empty"] == [""]


def test_valueless_key_replaces_values_then_value_restarts_list():
    result = parse_ini("k=1\nk\nk=2")
    assert result["default"]["k"] == ["2"]


def test_indented_sections_and_header_whitespace():
    result = parse_ini("    [  indented  ]\n        is_this_same     =        yes")
    assert result == {"indented": {"is_this_same": ["yes"]}}


def test_section_header_without_keys_is_not_created():
    assert parse_ini("[empty]\n[full]\nk=v") == {"full": {"k": ["v"]}}


def test_crlf_input():
    assert parse_ini("[a]\r\nk=v\r\n") == {"a": {"k": ["v"]}}


def test_missing_closing_bracket():
    with pytest.raises(IniError, match="line 1: Found opening bracket for section name but no closing bracket"):
        parse_ini("k=v\n[broken")


def test_empty_key_error():
    with pytest.raises(IniError, match="Key cannot be empty"):
        parse_ini("= value")


def test_iniError_is_value_error():
    with pytest.raises(ValueError):
        parse_ini("[open")


def test_render_default_section_has_no_header():
    text = render_ini({"default": {"key": ["value"]}, "sec": {"other": None}})
    assert text == f"key=value{LINE_ENDING}[sec]{LINE_ENDING}other{LINE_ENDING}"


def test_render_spaces_and_empty_value():
    text = render_ini(
        {"sec": {"a": ["1"], "b": [""]}},
        options=WriteOptions(space_around_delimiters=True),
    )
    assert text == f"[sec]{LINE_ENDING}a = 1{LINE_ENDING}b ={LINE_ENDING}"


def test_render_repeats_key_for_each_value():
    text = render_ini({"s": {"k": ["x", "y"]}})
    assert text.count("k=") == 2
    assert text.index("k=x") < text.index("k=y")


def test_render_blank_lines_between_sections():
    options = WriteOptions(blank_lines_between_sections=1)
    text = render_ini({"a": {"k": ["v"]}, "b": {"k": ["w"]}}, options=options)
    assert f"k=v{LINE_ENDING}{LINE_ENDING}[b]" in text


def test_render_empty_mapping():
    assert render_ini({}) == ""


@pytest.mark.parametrize(
    "source",
    [
        "top=level\n[one]\na=1\na=2\nflag\n[two]\nempty=\n",
        "[only]\nkey = some value\n",
    ],
)
def test_round_trip(source):
    parsed = parse_ini(source)
    assert parse_ini(render_ini(parsed)) == parsed


def test_round_trip_with_pretty_options():
    parsed = parse_ini("x=1\n[s]\ny=2\nz\n")
    options = WriteOptions(space_around_delimiters=True, blank_lines_between_sections=2)
    assert parse_ini(render_ini(parsed, "default", options)) == parsed