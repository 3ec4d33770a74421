"""
Unit tests for the user database.

Counts refer to the bundled users.json: 10 users.
"""

import pytest

from todo_service.exceptions import BadRequestException, DataLoadException
from todo_service.repositories import UserDatabase


class TestUserDatabase:
    """Test user loading, lookup and filtering"""

    def test_size(self, user_database):
        assert user_database.size() == 10

    def test_get_user(self, user_database):
        user = user_database.get_user("588935f50000000000000001")
        assert user is not None
        assert user.name == "Connie Stewart"
        assert user.age == 25
        assert user.company == "OHMNET"

    def test_get_unknown_user(self, user_database):
        assert user_database.get_user("missing") is None

    def test_list_all_users(self, user_database):
        assert len(user_database.list_users({})) == 10

    @pytest.mark.parametrize("age,expected", [("25", 3), ("37", 2), ("22", 1), ("99", 0)])
    def test_filter_by_age(self, user_database, age, expected):
        users = user_database.list_users({"age": [age]})
        assert len(users) == expected
        assert all(user.age == int(age) for user in users)

    def test_unparseable_age(self, user_database):
        with pytest.raises(BadRequestException) as exc_info:
            user_database.list_users({"age": ["abc"]})

        assert exc_info.value.parameter == "age"
        assert exc_info.value.message == "Specified age 'abc' can't be parsed to an integer"

    @pytest.mark.parametrize(
        "company,expected", [("OHMNET", 3), ("MOMENTIA", 2), ("ohmnet", 0)]
    )
    def test_filter_by_company(self, user_database, company, expected):
        users = user_database.list_users({"company": [company]})
        assert len(users) == expected

    def test_filter_by_age_and_company(self, user_database):
        users = user_database.list_users({"age": ["25"], "company": ["OHMNET"]})
        assert [user.name for user in users] == ["Connie Stewart", "Bolton Monroe"]

    def test_filter_helpers(self, user_database):
        by_age = user_database.filter_users_by_age(user_database.records, 37)
        assert len(by_age) == 2
        by_company = user_database.filter_users_by_company(by_age, "COMVEYER")
        assert len(by_company) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadException):
            UserDatabase(tmp_path / "users.json")

    def test_todo_file_is_not_a_user_file(self, sample_todo_file):
        """Records of the wrong shape fail validation"""
        with pytest.raises(DataLoadException):
            UserDatabase(sample_todo_file)
