from flask import Blueprint, jsonify, request

from app_context import get_system
from clinic_core.models import QueueError, QueueStatus

patients_bp = Blueprint('patients', __name__, url_prefix='/api')

ERROR_STATUS = {
    QueueError.INVALID_SPECIALIZATION: 404,
    QueueError.CAPACITY_EXCEEDED: 409,
}

_URGENT_VALUES = {True: True, False: False, 1: True, 0: False, "1": True, "0": False,
                  "true": True, "false": False}


def _error(kind: str, message: str, code: int):
    return jsonify({"status": "error", "error": kind, "message": message}), code


def _invalid_specialization():
    system = get_system()
    return _error(
        QueueError.INVALID_SPECIALIZATION.value,
        f"Specialization must be between 1 and {system.specialization_count}",
        ERROR_STATUS[QueueError.INVALID_SPECIALIZATION],
    )


def _parse_urgent(raw):
    if isinstance(raw, str):
        raw = raw.strip().lower()
    # 浮点数 1.0 等不接受，只接受布尔值与 0/1
    if isinstance(raw, float):
        return None
    try:
        return _URGENT_VALUES.get(raw)
    except TypeError:
        return None


@patients_bp.route('/specializations', methods=['GET'])
def list_specializations():
    """各专科的排队统计"""
    system = get_system()
    return jsonify({
        "capacity": system.queue_capacity,
        "specializations": [row.to_dict() for row in system.statistics()],
    })


@patients_bp.route('/specializations/<int(signed=True):specialization_id>', methods=['GET'])
def get_specialization(specialization_id: int):
    """单个专科的候诊情况"""
    system = get_system()
    try:
        queue = system.registry.get(specialization_id)
    except KeyError:
        return _invalid_specialization()

    patients = queue.snapshot()
    urgent = sum(1 for p in patients if p.is_urgent)
    return jsonify({
        "specialization_id": specialization_id,
        "capacity": queue.capacity,
        "urgent": urgent,
        "regular": len(patients) - urgent,
        "total": len(patients),
        "status": QueueStatus.classify(len(patients), queue.capacity).label,
        "patients": [p.to_dict() for p in patients],
    })


@patients_bp.route('/specializations/<int(signed=True):specialization_id>/patients', methods=['POST'])
def add_patient(specialization_id: int):
    """
    登记病人：name 必填，urgent 为 true/false 或 1/0
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _error("invalid_body", "Request body must be a JSON object.", 400)
    name = data.get('name')
    if not isinstance(name, str) or not name.strip():
        return _error("invalid_name", "Invalid name. Please enter a valid name.", 400)

    is_urgent = _parse_urgent(data.get('urgent', False))
    if is_urgent is None:
        return _error("invalid_status", "Status must be 0 for regular or 1 for urgent.", 400)

    system = get_system()
    result = system.add_patient(specialization_id, name.strip(), is_urgent)
    if result.error is QueueError.INVALID_SPECIALIZATION:
        return _invalid_specialization()
    if result.error is QueueError.CAPACITY_EXCEEDED:
        return _error(
            result.error.value,
            f"Sorry, we can't add more patients for specialization {specialization_id}.",
            ERROR_STATUS[result.error],
        )

    return jsonify({
        "status": "success",
        "specialization_id": specialization_id,
        "patient": result.value.to_dict(),
        "message": "Patient added successfully.",
    }), 201


@patients_bp.route('/specializations/<int(signed=True):specialization_id>/next', methods=['POST'])
def next_patient(specialization_id: int):
    """叫下一位病人，紧急优先"""
    system = get_system()
    result = system.next_patient(specialization_id)
    if result.error is QueueError.INVALID_SPECIALIZATION:
        return _invalid_specialization()
    if result.error is QueueError.EMPTY_QUEUE:
        # 没有病人是正常情况
        return jsonify({
            "status": "empty",
            "specialization_id": specialization_id,
            "patient": None,
            "message": f"No patients in specialization {specialization_id} at the moment. "
                       f"Have rest, Doctor.",
        })

    patient = result.value
    return jsonify({
        "status": "success",
        "specialization_id": specialization_id,
        "patient": patient.to_dict(),
        "message": f"{patient.name}, please go with the Doctor.",
    })


@patients_bp.route('/patients', methods=['GET'])
def list_patients():
    """所有有病人候诊的专科，按专科编号升序"""
    system = get_system()
    return jsonify({
        "specializations": [
            {
                "specialization_id": specialization_id,
                "total": len(snapshot),
                "patients": [p.to_dict() for p in snapshot],
            }
            for specialization_id, snapshot in system.waiting_patients()
        ]
    })


@patients_bp.app_errorhandler(404)
def not_found(error):
    """
    路由不匹配时也返回 JSON：专科编号不是整数时按无效专科处理
    """
    prefix = '/api/specializations/'
    if request.path.startswith(prefix):
        segment = request.path[len(prefix):].split('/', 1)[0]
        if not segment.lstrip('-').isdigit():
            return _invalid_specialization()
    return _error("not_found", "The requested URL was not found.", 404)
