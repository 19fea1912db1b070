"""
Tests for the in-memory INI document: parsing, single value upsert,
whitespace normalization and the Key= / +Key= list rewrite.
"""

import pytest

from vein_launcher.config.document import IniDocument, build_multi_block


def doc(text: str) -> IniDocument:
    return IniDocument.parse(text)


class TestParseSerialize:
    def test_empty(self):
        d = doc("")
        assert d.lines == []
        assert d.serialize() == ""

    def test_keeps_lines_verbatim(self):
        text = "; comment\n[URL]\nPort = 7777\n\n[Core.Log]\nLogOnline=Warning\n"
        assert doc(text).serialize() == text

    def test_missing_trailing_newline_is_added(self):
        assert doc("[URL]\nPort=1").serialize() == "[URL]\nPort=1\n"

    def test_get_and_as_dict(self):
        d = doc("[A]\nx = 1\nL=a\n+L=b\n[B]\ny=2\n")
        assert d.get("A", "x") == "1"
        assert d.get("B", "x") is None
        assert d.get_multi("A", "L") == ["a", "b"]
        assert d.as_dict() == {"A": {"x": ["1"], "L": ["a", "b"]}, "B": {"y": ["2"]}}

    def test_has_header_is_verbatim(self):
        d = doc("[URL] \n")
        assert not d.has_header("URL")
        assert doc("[URL]\n").has_header("URL")


class TestSetValue:
    def test_creates_section_in_empty_document(self):
        d = doc("")
        d.set_value("URL", "Port", "7777")
        assert d.serialize() == "[URL]\nPort=7777\n"

    def test_appends_new_section_at_end(self):
        d = doc("[URL]\nPort=7777\n")
        d.set_value("/Script/Vein.ServerSettings", "GS_ShowScoreboardBadges", "True")
        assert d.serialize() == (
            "[URL]\nPort=7777\n\n"
            "[/Script/Vein.ServerSettings]\nGS_ShowScoreboardBadges=True\n"
        )

    def test_no_double_blank_line_before_new_section(self):
        d = doc("[URL]\nPort=7777\n\n")
        d.set_value("Core.Log", "LogOnline", "Warning")
        assert d.serialize() == "[URL]\nPort=7777\n\n[Core.Log]\nLogOnline=Warning\n"

    def test_replaces_existing_value(self):
        d = doc("[URL]\nPort=7000\nMap=Foo\n")
        d.set_value("URL", "Port", "7777")
        assert d.serialize() == "[URL]\nPort=7777\nMap=Foo\n"

    def test_replaces_spaced_value(self):
        d = doc("[URL]\nPort = 7000\n")
        d.set_value("URL", "Port", "7777")
        assert d.serialize() == "[URL]\nPort=7777\n"

    def test_drops_duplicate_keys(self):
        d = doc("[A]\nx=1\ny=0\nx=2\n")
        d.set_value("A", "x", "3")
        assert d.serialize() == "[A]\nx=3\ny=0\n"

    def test_inserts_before_trailing_blank_line(self):
        d = doc("[A]\nx=1\n\n[B]\ny=2\n")
        d.set_value("A", "z", "3")
        assert d.serialize() == "[A]\nx=1\nz=3\n\n[B]\ny=2\n"

    def test_key_match_is_case_sensitive(self):
        d = doc("[A]\nport=1\n")
        d.set_value("A", "Port", "2")
        assert d.serialize() == "[A]\nport=1\nPort=2\n"

    def test_value_written_verbatim(self):
        d = doc("")
        d.set_value("/Script/Vein.ServerSettings", "DiscordChatWebhookURL", '"https://x/y?a=b c"')
        assert d.get("/Script/Vein.ServerSettings", "DiscordChatWebhookURL") == '"https://x/y?a=b c"'

    def test_empty_value(self):
        d = doc("[A]\nPassword=secret\n")
        d.set_value("A", "Password", "")
        assert d.serialize() == "[A]\nPassword=\n"

    def test_multiline_value_keeps_first_line(self):
        d = doc("[URL]\nMap=x\n")
        d.set_value("URL", "Map", "a\nb")
        assert d.serialize() == "[URL]\nMap=a\n"

    def test_header_with_trailing_space_is_another_section(self):
        d = doc("[URL] \nPort=1\n")
        d.set_value("URL", "Port", "2")
        assert d.serialize() == "[URL] \nPort=1\n\n[URL]\nPort=2\n"

    def test_same_key_in_other_section_untouched(self):
        d = doc("[OnlineSubsystemSteam]\nPort=1\n[URL]\nPort=2\n")
        d.set_value("URL", "Port", "3")
        assert d.serialize() == "[OnlineSubsystemSteam]\nPort=1\n[URL]\nPort=3\n"


class TestNormalizeKey:
    def test_strips_whitespace_around_equals(self):
        d = doc("[A]\nFoo.Bar  =  baz\nOther = 1\n")
        d.normalize_key("A", "Foo.Bar")
        assert d.serialize() == "[A]\nFoo.Bar=baz\nOther = 1\n"

    def test_dot_is_literal(self):
        d = doc("[A]\nFooXBar = 1\n")
        d.normalize_key("A", "Foo.Bar")
        assert d.serialize() == "[A]\nFooXBar = 1\n"

    def test_only_target_section(self):
        d = doc("[A]\nPort = 1\n[B]\nPort = 2\n")
        d.normalize_key("B", "Port")
        assert d.serialize() == "[A]\nPort = 1\n[B]\nPort=2\n"


class TestBuildMultiBlock:
    @pytest.mark.parametrize("raw, expected", [
        ("111,222,333", ["K=111", "+K=222", "+K=333"]),
        ("111", ["K=111"]),
        ("111,,222,", ["K=111", "+K=222"]),
        ("111, 222", ["K=111", "+K= 222"]),
        (" ,111", ["K= ", "+K=111"]),
        ("1,2\n3,4", ["K=1", "+K=2"]),
        ("", []),
        (",111", []),
    ])
    def test_blocks(self, raw, expected):
        assert build_multi_block("K", raw) == expected


class TestSetMulti:
    SECTION = "/Script/Vein.VeinGameSession"

    def test_appends_section_when_missing(self):
        d = doc("[URL]\nPort=7777\n")
        d.set_multi(self.SECTION, "SuperAdminSteamIDs", "111,222")
        assert d.serialize() == (
            "[URL]\nPort=7777\n\n"
            "[/Script/Vein.VeinGameSession]\nSuperAdminSteamIDs=111\n+SuperAdminSteamIDs=222\n"
        )

    def test_empty_value_without_section_is_noop(self):
        d = doc("[URL]\nPort=7777\n")
        d.set_multi(self.SECTION, "AdminSteamIDs", "")
        assert d.serialize() == "[URL]\nPort=7777\n"

    def test_block_anchored_after_header(self):
        d = doc("[/Script/Vein.VeinGameSession]\nServerName=Test\nAdminSteamIDs=1\n+AdminSteamIDs=2\n")
        d.set_multi(self.SECTION, "AdminSteamIDs", "7,8,9")
        assert d.serialize() == (
            "[/Script/Vein.VeinGameSession]\nAdminSteamIDs=7\n+AdminSteamIDs=8\n+AdminSteamIDs=9\nServerName=Test\n"
        )

    def test_removes_scattered_continuations(self):
        d = doc("[V]\nA=1\nName=x\n+A=2\n[W]\nA=9\n")
        d.set_multi("V", "A", "7,8")
        assert d.serialize() == "[V]\nA=7\n+A=8\nName=x\n[W]\nA=9\n"

    def test_empty_value_deletes_entries(self):
        d = doc("[V]\nName=x\nSuper=1\n+Super=2\nAdmin=5\n")
        d.set_multi("V", "Super", "")
        assert d.serialize() == "[V]\nName=x\nAdmin=5\n"

    def test_prefix_of_other_key_is_kept(self):
        d = doc("[V]\nAdminSteamIDs=1\nSuperAdminSteamIDs=2\n")
        d.set_multi("V", "AdminSteamIDs", "3")
        assert d.serialize() == "[V]\nAdminSteamIDs=3\nSuperAdminSteamIDs=2\n"

    def test_header_with_trailing_space_is_another_section(self):
        d = doc("[V] \nA=1\n")
        d.set_multi("V", "A", "2")
        assert d.serialize() == "[V] \nA=1\n\n[V]\nA=2\n"

    def test_repeated_section_header_reactivates(self):
        d = doc("[V]\nA=1\n[W]\nA=2\n[V]\n+A=3\n")
        d.set_multi("V", "A", "")
        assert d.serialize() == "[V]\n[W]\nA=2\n[V]\n"
