"""Page tests for the grocery list and meal planner, run with Streamlit's AppTest."""

from datetime import date, timedelta
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from streamlit.testing.v1 import AppTest

import config.database
from controllers.profile_controller import date_key
from services.profile_service import ProfileService
from tests.conftest import make_recipe

PAGES = Path(__file__).resolve().parent.parent / "pages"
GROCERY_PAGE = str(PAGES / "2_🛒_Grocery_List.py")
PLANNER_PAGE = str(PAGES / "3_📅_Meal_Planner.py")
USER = "u1"


def db_down(*args, **kwargs):
    raise OperationalError("UPDATE", {}, Exception("db down"))


@pytest.fixture
def session_factory(monkeypatch):
    """A fresh, uninitialized database that the pages use as their default."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    monkeypatch.setattr(config.database, "SessionLocal", factory)
    monkeypatch.setenv("DEV_USER_ID", USER)
    yield factory
    engine.dispose()


def open_page(path):
    return AppTest.from_file(path, default_timeout=10).run()


class TestGroceryPage:
    """Test suite for the grocery list page."""

    def test_opens_first_on_a_fresh_database(self, session_factory):
        at = open_page(GROCERY_PAGE)

        assert not at.exception
        assert len(at.error) == 0
        assert "empty" in at.info[0].value

    def test_clearing_a_name_is_refused(self, session_factory):
        ProfileService(session_factory).add_to_grocery_list(USER, ["salt"])
        at = open_page(GROCERY_PAGE)

        at.text_input(key="grocery_name_0").set_value("").run()

        assert not at.exception
        assert at.text_input(key="grocery_name_0").value == "salt"
        assert ProfileService(session_factory).get_profile(USER).grocery_list[0].name == "salt"

    def test_rename(self, session_factory):
        ProfileService(session_factory).add_to_grocery_list(USER, ["salt"])
        at = open_page(GROCERY_PAGE)

        at.text_input(key="grocery_name_0").set_value("sea salt").run()

        assert not at.exception
        assert at.text_input(key="grocery_name_0").value == "sea salt"
        assert ProfileService(session_factory).get_profile(USER).grocery_list[0].name == "sea salt"

    def test_check_item(self, session_factory):
        ProfileService(session_factory).add_to_grocery_list(USER, ["salt"])
        at = open_page(GROCERY_PAGE)

        at.checkbox(key="grocery_check_0").check().run()

        assert at.checkbox(key="grocery_check_0").value is True
        assert ProfileService(session_factory).get_profile(USER).grocery_list[0].checked is True

    def test_failed_check_snaps_back(self, session_factory, monkeypatch):
        ProfileService(session_factory).add_to_grocery_list(USER, ["salt"])
        monkeypatch.setattr(ProfileService, "toggle_grocery_item", db_down)
        at = open_page(GROCERY_PAGE)

        at.checkbox(key="grocery_check_0").check().run()

        assert not at.exception
        assert at.checkbox(key="grocery_check_0").value is False


class TestPlannerPage:
    """Test suite for the meal planner page."""

    def _seed_today(self, session_factory):
        today = date.today()
        recipe = make_recipe(1, recipe_id=3, title="Soup")
        ProfileService(session_factory).plan_meal(USER, date_key(today), recipe)
        return today, f"move_{date_key(today)}_0_3"

    def test_opens_first_on_a_fresh_database(self, session_factory):
        at = open_page(PLANNER_PAGE)

        assert not at.exception
        assert len(at.error) == 0

    def test_move_meal(self, session_factory):
        today, move_key = self._seed_today(session_factory)
        at = open_page(PLANNER_PAGE)

        at.selectbox(key=move_key).select_index(2).run()

        assert not at.exception
        plan = ProfileService(session_factory).get_profile(USER).meal_plan
        assert date_key(today) not in plan
        assert [r.id for r in plan[date_key(today + timedelta(days=2))]] == [3]

    def test_failed_move_snaps_back(self, session_factory, monkeypatch):
        today, move_key = self._seed_today(session_factory)
        monkeypatch.setattr(ProfileService, "move_meal", db_down)
        at = open_page(PLANNER_PAGE)

        at.selectbox(key=move_key).select_index(2).run()

        assert not at.exception
        assert at.session_state[move_key] == today
        plan = ProfileService(session_factory).get_profile(USER).meal_plan
        assert [r.id for r in plan[date_key(today)]] == [3]
