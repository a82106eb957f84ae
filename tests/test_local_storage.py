from datetime import datetime, timedelta

from models.grocery_list import GroceryItem, GroceryList
from storage.local_storage import LocalStorage
from conftest import make_recipe


def make_list(list_id, user_id, updated_at, title="List"):
    return GroceryList(
        id=list_id,
        title=title,
        items=[GroceryItem(name="tomatoes", amount=8, category="produce", recipe_ids=["recipe1"])],
        user_id=user_id,
        generated_from=["recipe1"],
        created_at=updated_at,
        updated_at=updated_at,
    )


class TestRecipeStorage:

    def test_recipe_round_trip(self, local_storage, pasta_salad):
        local_storage.add_recipe(pasta_salad)

        loaded = local_storage.get_recipe_by_id("recipe1")

        assert loaded == pasta_salad
        assert local_storage.file_exists("recipes.json")

    def test_missing_recipe(self, local_storage):
        assert local_storage.get_recipe_by_id("nope") is None

    def test_get_recipes_by_ids_keeps_request_order_and_skips_unknown(self, local_storage, pasta_salad, tomato_soup):
        local_storage.add_recipe(pasta_salad)
        local_storage.add_recipe(tomato_soup)

        found = local_storage.get_recipes_by_ids(["recipe2", "missing", "recipe1", "recipe2"])

        assert [recipe.id for recipe in found] == ["recipe2", "recipe1"]

    def test_visible_recipes(self, local_storage):
        local_storage.add_recipe(make_recipe("mine", "Mine", [], author_id="me", visibility="private"))
        local_storage.add_recipe(make_recipe("shared", "Shared", [], author_id="other", visibility="public"))
        local_storage.add_recipe(make_recipe("hidden", "Hidden", [], author_id="other", visibility="private"))

        visible = local_storage.get_recipes_visible_to("me")

        assert sorted(recipe.id for recipe in visible) == ["mine", "shared"]

    def test_corrupt_file_loads_empty(self, local_storage):
        local_storage.recipes_file.write_text("{not json", encoding="utf-8")

        assert local_storage.load_recipes() == []


class TestGroceryListStorage:

    def test_grocery_list_round_trip(self, local_storage):
        grocery_list = make_list("list1", "user1", datetime(2024, 1, 1, 12, 0))
        local_storage.add_grocery_list(grocery_list)

        loaded = local_storage.get_grocery_list("list1", "user1")

        assert loaded == grocery_list
        assert loaded.items[0].recipe_ids == ["recipe1"]

    def test_grocery_list_scoped_to_owner(self, local_storage):
        local_storage.add_grocery_list(make_list("list1", "user1", datetime(2024, 1, 1)))

        assert local_storage.get_grocery_list("list1", "user2") is None

    def test_lists_for_user_newest_first_with_paging(self, local_storage):
        base = datetime(2024, 1, 1)
        for i in range(3):
            local_storage.add_grocery_list(make_list(f"list{i}", "user1", base + timedelta(days=i)))
        local_storage.add_grocery_list(make_list("other", "user2", base + timedelta(days=10)))

        first_page = local_storage.get_grocery_lists_for_user("user1", limit=2, offset=0)
        second_page = local_storage.get_grocery_lists_for_user("user1", limit=2, offset=2)

        assert [gl.id for gl in first_page] == ["list2", "list1"]
        assert [gl.id for gl in second_page] == ["list0"]

    def test_update_grocery_list(self, local_storage):
        grocery_list = make_list("list1", "user1", datetime(2024, 1, 1))
        local_storage.add_grocery_list(grocery_list)

        grocery_list.title = "Renamed"
        assert local_storage.update_grocery_list(grocery_list) is True
        assert local_storage.get_grocery_list("list1", "user1").title == "Renamed"

        assert local_storage.update_grocery_list(make_list("ghost", "user1", datetime(2024, 1, 1))) is False

    def test_delete_grocery_list(self, local_storage):
        local_storage.add_grocery_list(make_list("list1", "user1", datetime(2024, 1, 1)))

        assert local_storage.delete_grocery_list("list1") is True
        assert local_storage.delete_grocery_list("list1") is False
        assert local_storage.load_grocery_lists() == []

    def test_data_directory_created(self, tmp_path):
        storage = LocalStorage(str(tmp_path / "nested" / "data"))

        assert storage.get_data_directory().is_dir()
        assert not storage.file_exists("grocery_lists.json")
