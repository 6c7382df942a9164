from .filter_config import FilterInstanceConfigForm, next_instance_id

__all__ = ["FilterInstanceConfigForm", "next_instance_id"]
