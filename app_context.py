from flask import current_app

from clinic_core import HospitalSystem

EXTENSION_KEY = "hospital"


def get_system() -> HospitalSystem:
    """当前应用绑定的医院系统实例（由 create_app 创建或传入）"""
    return current_app.extensions[EXTENSION_KEY]
