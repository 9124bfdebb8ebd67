import pytest
from fastapi.testclient import TestClient

from menurec.api.dependencies import set_store
from menurec.data.store import MenuStore
from menurec.main import create_app

SCENARIO_ROWS = [
    {"Name": "Espresso", "Category": "Beverage", "Flavor": "Strong"},
    {"Name": "Tea", "Category": "Beverage", "Flavor": "Refreshing"},
    {"Name": "Pizza", "Category": "Food", "Flavor": "Savory"},
]

MENU_CSV = (
    " Name , Category ,Flavor, Description ,Price\n"
    "Espresso, Beverage ,Strong,Short and dark,$2.50\n"
    "Tea,Beverage, Refreshing ,Green tea,1.75\n"
    "\n"
    "Pizza,Food,Savory,Margherita,\"$1,200.00\"\n"
    ",Food,Spicy,No name here,3\n"
    "Wings,Food,Spicy,Hot wings,cheap\n"
    "Latte,Beverage,Sweet,Milky,\n"
)


@pytest.fixture
def scenario_store():
    store = MenuStore(include_all_sentinel=True, sentinel_label="All Categories")
    store.load_rows(SCENARIO_ROWS, "scenario")
    return store


@pytest.fixture
def menu_csv_path(tmp_path):
    path = tmp_path / "menu.csv"
    path.write_text(MENU_CSV, encoding="utf-8")
    return path


@pytest.fixture
def client(scenario_store):
    set_store(scenario_store)
    yield TestClient(create_app())
    set_store(None)
