"""Example: use the service layer without Flask.

Controllers are a thin layer; the business rules live in the services.
"""

from config import load_settings

from siopamb.container import build_container
from siopamb.stats.service import count_by_scale_type, count_by_unit


def main():
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG)
    reports = container.report_service.list_all()
    print("por pelotão:", count_by_unit(reports))
    print("por escala:", count_by_scale_type(reports))


if __name__ == "__main__":
    main()
