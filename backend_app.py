from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from app_context import EXTENSION_KEY
from clinic_core import HospitalSystem
from config import HospitalConfig, configure_logging


def create_app(system: Optional[HospitalSystem] = None,
               config: Optional[HospitalConfig] = None) -> Flask:
    """
    创建 Flask 应用；未传入 system 时按配置新建一个
    """
    config = config or HospitalConfig.from_env()
    # 初始化Flask应用
    app = Flask(__name__)

    # 配置CORS，允许跨域请求
    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"]
        }
    })

    app.extensions[EXTENSION_KEY] = system or HospitalSystem.from_config(config)

    @app.route("/")
    def index():
        """服务信息"""
        hospital = app.extensions[EXTENSION_KEY]
        return jsonify({
            "service": "hospital-queue",
            "specializations": hospital.specialization_count,
            "queue_capacity": hospital.queue_capacity,
        })

    # 导入并注册蓝图
    from routes.patients import patients_bp
    from routes.reports import reports_bp

    app.register_blueprint(patients_bp)
    app.register_blueprint(reports_bp)
    return app


def main() -> None:
    config = HospitalConfig.from_env()
    configure_logging(config.log_level)
    app = create_app(config=config)
    # host='0.0.0.0' 监听所有网络接口，端口可以通过环境变量PORT修改
    app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
