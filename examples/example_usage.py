"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.gym_admin.gym_admin.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for row in container.member_service.list_members(search=None)[:5]:
        print(row["name"], row["expiration_date"], row["status"])
    print(container.dashboard_service.metrics().to_dict())


if __name__ == "__main__":
    main()
