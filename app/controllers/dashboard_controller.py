def read_dashboard() -> dict:
    return {"msg": "Dashboard data accessed successfully"}
