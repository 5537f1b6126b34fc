from docket.api import users, cases, judges, lawyers, hearings

__all__ = ["users", "cases", "judges", "lawyers", "hearings"]
