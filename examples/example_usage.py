"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services and the store.
"""

from school_dashboard.container import build_container
from school_dashboard.core.enums import Role


def main():
    container = build_container(seed_demo_data=True)

    result = container.attendance_service.submit_class(
        current_role=Role.ADMIN,
        class_name="10",
        section="A",
        statuses={"s1": "Present", "s2": "Absent"},
    )
    for log in result.notifications:
        print(f"[{log.type.value}] {log.parent_phone}: {log.message}")

    print(container.dashboard_service.build().attendance_today)


if __name__ == "__main__":
    main()
