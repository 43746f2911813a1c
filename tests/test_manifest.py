import pytest

from orderfill.manifest import ManifestError, assemble_manifests
from orderfill.models import MenuItem, WishlistEntry, WishlistRow

MENU = {
    "margherita": MenuItem("margherita", "Margherita"),
    "diavola-half": MenuItem("diavola-half", "Diavola (half)", is_half=True),
}


def test_groups_rows_by_first_appearance():
    rows = [
        WishlistRow("bob", "margherita", 3),
        WishlistRow("alice", "diavola-half", 5),
        WishlistRow("bob", "diavola-half", 2),
    ]
    manifests = assemble_manifests(rows, MENU)

    assert [m.user_id for m in manifests] == ["bob", "alice"]
    assert manifests[0].items == [
        WishlistEntry("margherita", 3, is_half=False),
        WishlistEntry("diavola-half", 2, is_half=True),
    ]
    assert manifests[1].items == [WishlistEntry("diavola-half", 5, is_half=True)]


def test_without_menu_everything_is_whole():
    manifests = assemble_manifests([WishlistRow("bob", "diavola-half", 4)])
    assert manifests[0].items == [WishlistEntry("diavola-half", 4, is_half=False)]


def test_empty_rows():
    assert assemble_manifests([], MENU) == []


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_rejects_out_of_range_rating(rating):
    with pytest.raises(ManifestError, match="between 1 and 5"):
        assemble_manifests([WishlistRow("bob", "margherita", rating)], MENU)


def test_rejects_unknown_food():
    with pytest.raises(ManifestError, match="Unknown food 'sushi'"):
        assemble_manifests([WishlistRow("bob", "sushi", 3)], MENU)


@pytest.mark.parametrize("rating", [True, False])
def test_rejects_boolean_rating(rating):
    with pytest.raises(ManifestError, match="between 1 and 5"):
        assemble_manifests([WishlistRow("bob", "margherita", rating)], MENU)
