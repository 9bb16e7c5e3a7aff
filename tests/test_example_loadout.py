from kitforge.services import load_universe

from tests.helpers.definitions import EXAMPLE_LOADOUT


def test_example_file_resolves_three_classes() -> None:
    universe = load_universe(EXAMPLE_LOADOUT)

    assert universe.names() == ["baseMan", "rm", "ar"]
    assert universe.get("ar").lineage == ("ar", "rm", "baseMan")
    assert universe.get("ar").display_name == "Automatic Rifleman"


def test_ar_vest_uses_its_own_declaration() -> None:
    universe = load_universe(EXAMPLE_LOADOUT)

    assert universe.get("ar").sequence("vest") == (
        "milgp_v_mmac_hgunner_belt_cb",
        "milgp_v_mmac_hgunner_belt_rgr",
        "milgp_v_mmac_hgunner_belt_khk",
    )


def test_ar_magazines_expand_in_order() -> None:
    universe = load_universe(EXAMPLE_LOADOUT)

    magazines = universe.get("ar").sequence("magazines")

    assert len(magazines) == 9
    assert list(magazines) == (
        ["SmokeShell"] * 2
        + ["rhs_mag_m67"] * 2
        + ["11Rnd_45ACP_Mag"] * 2
        + ["sps_200Rnd_556x45_M855A1_Mixed_KAC_Box"] * 3
    )


def test_ar_linked_items_pass_through_from_base() -> None:
    universe = load_universe(EXAMPLE_LOADOUT)

    assert universe.get("ar").sequence("linkedItems") == ("ItemWatch", "ItemMap", "ItemCompass")
    assert universe.get("rm").sequence("linkedItems") == ("ItemWatch", "ItemMap", "ItemCompass")


def test_ar_inherits_rifleman_pools_it_does_not_redeclare() -> None:
    universe = load_universe(EXAMPLE_LOADOUT)
    ar = universe.get("ar")
    rm = universe.get("rm")

    assert ar.sequence("uniform") == rm.sequence("uniform")
    assert len(ar.sequence("uniform")) == 10
    assert ar.sequence("items") == rm.sequence("items")
    assert ar.sequence("scope") == ("optic_mrco",)
    assert ar.sequence("primaryWeapon") == ("sps_weap_kac_lamg_hg_blk",)
    assert ar.sequence("backpackItems") == ("sps_200Rnd_556x45_M855A1_Mixed_KAC_Box",) * 4


def test_rifleman_items_count_after_expansion() -> None:
    universe = load_universe(EXAMPLE_LOADOUT)

    items = universe.get("rm").sequence("items")

    assert len(items) == 1 + 10 + 5 + 5 + 4 + 2 + 2 + 2
    assert items[0] == "ACRE_PRC343"


def test_base_man_is_unarmed_and_empty() -> None:
    base = load_universe(EXAMPLE_LOADOUT).get("baseMan")

    assert base.display_name == "Unarmed"
    assert base.sequence("primaryWeapon") == ()
    assert base.code == ""
