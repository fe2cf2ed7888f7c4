from __future__ import annotations


def test_top_level_exports() -> None:
    import elemental

    assert elemental.Elemental is not None
    assert elemental.Element is not None
    assert elemental.CATALOG is not None
    assert elemental.conform_name("FourFiveSix") == "four_five_six"
    assert isinstance(elemental.__version__, str)


def test_package_paths_work() -> None:
    from elemental.api import create_api_app, mount_elementals_api
    from elemental.api.serializers import element_to_item, elemental_to_item
    from elemental.core import CATALOG, Element, Elemental, ElementalCatalog
    from elemental.core.errors import ElementalError, UnknownMemberError
    from elemental.io import decode_ordinals, encode_ordinals

    assert create_api_app is not None
    assert mount_elementals_api is not None
    assert element_to_item is not None
    assert elemental_to_item is not None
    assert isinstance(CATALOG, ElementalCatalog)
    assert Element is not None
    assert Elemental is not None
    assert issubclass(UnknownMemberError, ElementalError)
    assert issubclass(UnknownMemberError, KeyError)
    assert encode_ordinals is not None
    assert decode_ordinals is not None
