import pytest
from wtguesser.engine import format_name, generate_aliases
from wtguesser.engine.naming import get_country_prefix, nation_name, to_roman, rank_to_number, vehicle_class

# --- format_name golden tests ---
@pytest.mark.parametrize("identifier,country,expected", [
    ("cn_cm11", "china", "CM11"),
    ("ussr_t_34_85", "ussr", "T-34-85"),
    ("us_m4", "usa", "M4"),
    ("germ_marder_df_105", "germany", "Marder DF-105"),
    ("germ_marder_1a3", "germany", "Marder-1A3"),
    ("germ_pzkpfw_iv_ausf_h", "germany", "Pzkpfw IV Ausf H"),
    ("germ_flakpanzer_341", "germany", "Flakpanzer-341"),
    ("ussr_kv_1_zis_5", "ussr", "KV-1 Zis-5"),
    ("germ_flak_pak_kwk", "germany", "FlaK PaK KwK"),
    ("us_m1_abrams", "usa", "M1 Abrams"),
    ("us_m4a3_105", "usa", "M4A3-105"),
    ("uk_centurion_mk_3", "britain", "Centurion Mk-3"),
    ("sw_strv_103a", "sweden", "STRV-103A"),
])
def test_format_name_golden(identifier, country, expected):
    assert format_name(identifier, country) == expected

def test_format_name_prefix_fallbacks():
    # country code itself used as prefix when the mapped one is absent
    assert format_name("britain_foo", "britain") == "Foo"
    # unknown country: strip "<code>_"
    assert format_name("xx_tank_1", "xx") == "Tank-1"
    # no prefix at all: nothing stripped
    assert format_name("t_34", "ussr") == "T-34"
    assert format_name("CN_CM11", "CHINA") == "CM11"

def test_format_name_total():
    assert format_name("", "usa") == ""
    assert format_name("us_", "usa") == ""

def test_format_name_deterministic():
    a = format_name("ussr_t_34_85", "ussr")
    b = format_name("ussr_t_34_85", "ussr")
    assert a == b

def test_get_country_prefix():
    assert get_country_prefix("germany") == "germ"
    assert get_country_prefix("Britain") == "uk"
    assert get_country_prefix("xx") == "xx"

# --- aliases ---
def test_generate_aliases_marder():
    aliases = generate_aliases("Marder DF-105", "germ_marder_df_105")
    assert aliases == [
        "marder df-105",
        "germ marder df 105",
        "marder df 105",
        "marderdf105",
        "marder df105",
        "marderdf-105",
        "marder",
    ]

def test_generate_aliases_panzer_synonym():
    aliases = generate_aliases("Pzkpfw IV Ausf H", "germ_pzkpfw_iv_ausf_h")
    assert aliases == [
        "pzkpfw iv ausf h",
        "germ pzkpfw iv ausf h",
        "pzkpfwivausfh",
        "pzkpfw",
        "panzer iv ausf h",
    ]

@pytest.mark.parametrize("name,identifier,expected", [
    ("CM11", "cn_cm11", ["cm11", "cn cm11"]),
    ("Ariete", "ariete", ["ariete"]),
    ("", "", []),
])
def test_generate_aliases_small(name, identifier, expected):
    assert generate_aliases(name, identifier) == expected

@pytest.mark.parametrize("identifier,country", [
    ("ussr_t_34_85", "ussr"),
    ("germ_marder_1a3", "germany"),
    ("us_m1_abrams", "usa"),
    ("uk_centurion_mk_3", "britain"),
    ("sw_strv_103a", "sweden"),
])
def test_generate_aliases_shape(identifier, country):
    name = format_name(identifier, country)
    aliases = generate_aliases(name, identifier)
    assert aliases[0] == name.lower()
    assert identifier.replace("_", " ") in aliases
    assert "" not in aliases
    assert len(aliases) == len(set(aliases))
    assert aliases == generate_aliases(name, identifier)

# --- helpers ---
def test_nation_name():
    assert nation_name("britain") == "Great Britain"
    assert nation_name("USSR") == "USSR"
    assert nation_name("atlantis") == "Atlantis"

def test_to_roman():
    assert to_roman(1) == "I"
    assert to_roman(4) == "IV"
    assert to_roman(9) == "IX"
    assert to_roman(12) == "12"

@pytest.mark.parametrize("label,expected", [
    ("IV", 4),
    ("Rank IV", 4),
    ("rank 4", 4),
    ("7", 7),
    ("x", 10),
    ("", 0),
    ("elite", 0),
])
def test_rank_to_number(label, expected):
    assert rank_to_number(label) == expected

def test_vehicle_class():
    assert vehicle_class("tank_destroyer") == "TANK DESTROYER"
    assert vehicle_class("spaa") == "SPAA"
