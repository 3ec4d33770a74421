"""
A fake "database" of user info, read from a JSON file at startup.
"""

from typing import List, Optional, Sequence

from ..models import User
from .json_database import JsonDatabase, QueryParams


class UserDatabase(JsonDatabase[User]):
    """In-memory collection of users with age and company filters."""

    record_type = User
    resource_name = "user"

    def get_user(self, user_id: str) -> Optional[User]:
        """Get the single user with the given id, or None."""
        return self.get(user_id)

    def list_users(self, query_params: QueryParams) -> List[User]:
        """
        Get all the users satisfying the queries in the params.

        Args:
            query_params: Map of query keys to the values supplied for them

        Returns:
            The users matching ``age`` and ``company`` when given

        Raises:
            BadRequestException: If age is not an integer
        """
        filtered: Sequence[User] = self.records

        age = self.first_value(query_params, "age")
        if age is not None:
            filtered = self.filter_users_by_age(filtered, self.parse_int("age", age))

        company = self.first_value(query_params, "company")
        if company is not None:
            filtered = self.filter_users_by_company(filtered, company)

        return list(filtered)

    def filter_users_by_age(self, users: Sequence[User], target_age: int) -> List[User]:
        """Get all the users from ``users`` having the target age."""
        return [user for user in users if user.age == target_age]

    def filter_users_by_company(
        self, users: Sequence[User], target_company: str
    ) -> List[User]:
        """Get all the users from ``users`` having the target company."""
        return [user for user in users if user.company == target_company]
