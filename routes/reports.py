from flask import Blueprint, jsonify

from app_context import get_system

reports_bp = Blueprint('reports', __name__, url_prefix='/api/report')


@reports_bp.route('/statistics', methods=['GET'])
def statistics():
    """
    医院统计：每个专科的紧急/普通/合计人数与状态，以及全院汇总
    状态每次请求时根据当前人数重新计算
    """
    system = get_system()
    return jsonify({
        "summary": system.summary(),
        "specializations": [row.to_dict() for row in system.statistics()],
    })
