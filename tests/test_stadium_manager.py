import pytest

from stadiumbook.stadium import BasketballStadium, FootballStadium
from stadiumbook.stadium_manager import StadiumManager


@pytest.fixture
def manager():
    m = StadiumManager()
    m.add(FootballStadium(1, "Arena", "Tashkent", 50000, 4.5))
    m.add(BasketballStadium(2, "Court", "Samarkand", 30000, 3.0))
    m.add(FootballStadium(3, "Field", "Tashkent", 20000, 2.5))
    return m


def test_len_and_iteration_order(manager):
    assert len(manager) == 3
    assert [s.stadium_id for s in manager] == [1, 2, 3]


def test_get_returns_added_stadium(manager):
    stadium = manager.get(2)
    assert stadium is not None and stadium.name == "Court"


def test_get_missing_returns_none(manager):
    assert manager.get(99) is None


def test_remove_existing(manager):
    assert manager.remove(1) is True
    assert manager.get(1) is None
    assert len(manager) == 2


def test_remove_missing_leaves_collection(manager):
    assert manager.remove(42) is False
    assert len(manager) == 3


def test_by_type(manager):
    assert [s.stadium_id for s in manager.by_type("Football")] == [1, 3]
    assert manager.by_type("football") == []


def test_by_location(manager):
    assert [s.stadium_id for s in manager.by_location("Tashkent")] == [1, 3]


def test_by_rating_is_inclusive(manager):
    assert [s.stadium_id for s in manager.by_rating(3.0)] == [1, 2]


def test_describe_missing(manager):
    assert manager.describe(42) == "Stadium with ID 42 not found."


def test_describe_found(manager):
    assert manager.describe(2) == manager.get(2).describe()


def test_describe_all(manager):
    assert manager.describe_all().split("\n") == [s.describe() for s in manager]


def test_save_writes_records(manager, tmp_path):
    path = tmp_path / "stadiums.txt"
    manager.save(path)
    assert path.read_text(encoding="utf-8") == "".join(s.serialize() for s in manager)


def test_save_load_round_trip(manager, tmp_path):
    path = tmp_path / "stadiums.txt"
    manager.save(path)
    loaded = StadiumManager()
    loaded.load(path)
    assert list(loaded) == list(manager)


def test_load_skips_unknown_types(tmp_path):
    path = tmp_path / "stadiums.txt"
    path.write_text(
        "Tennis,5,Club,Bukhara,100,4\nBasketball,6,Hall,Bukhara,200,5\n\n",
        encoding="utf-8",
    )
    m = StadiumManager()
    m.load(path)
    assert [(s.kind, s.stadium_id) for s in m] == [("Basketball", 6)]


def test_load_appends(manager, tmp_path):
    path = tmp_path / "stadiums.txt"
    manager.save(path)
    manager.load(path)
    assert len(manager) == 6


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        StadiumManager().load(tmp_path / "absent.txt")