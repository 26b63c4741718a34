import copy
import json
from pathlib import Path
from typing import Any, Dict, List


class TestDataLoader:
    """Seed data for integration tests, read once from test_data.json"""

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get_copy(cls, key: str) -> Any:
        return copy.deepcopy(cls.load()[key])

    @classmethod
    def employee_payload(cls, name: str, **overrides) -> Dict[str, Any]:
        payload = cls.get_copy("employees")[name]
        payload.update(overrides)
        return payload

    @classmethod
    def tasks_for(cls, company_key: str) -> List[Dict[str, Any]]:
        return [t for t in cls.get_copy("tasks") if t["company"] == company_key]
