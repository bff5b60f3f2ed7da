import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_pymongo import PyMongo
from werkzeug.exceptions import HTTPException

from productapi.exceptions import ProductError
from productapi.services import ProductRepository, ProductService

logger = logging.getLogger(__name__)


def _error_response(message, status):
    return jsonify({
        'success': False,
        'error': message
    }), status


def _register_error_handlers(app):
    @app.errorhandler(ProductError)
    def handle_product_error(e):
        return _error_response(e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return _error_response(e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error")
        return _error_response(str(e), 500)


def _connect_repository(app) -> ProductRepository:
    """初始化 MongoDB 并创建商品仓库"""
    mongo = PyMongo(app, serverSelectionTimeoutMS=app.config['MONGO_TIMEOUT_MS'])
    if mongo.db is None:
        raise RuntimeError('MONGO_URI must include a database name')
    repository = ProductRepository.from_database(mongo.db, app.config['MONGO_COLLECTION'])
    try:
        repository.ping()
        logger.info("Connected to MongoDB successfully")
    except ProductError as e:
        # 保持启动，请求时再报告存储错误
        logger.warning("MongoDB connection error: %s", e.message)
    return repository


def create_app(config_object=None, repository=None):
    """创建 Flask 应用

    repository: 预先构建的 ProductRepository；为空时按配置连接 MongoDB。
    """
    if config_object is None:
        from config import Config
        config_object = Config

    app = Flask(__name__)
    app.config.from_object(config_object)

    # CORS: use explicit allowlist in production when provided.
    cors_origins = app.config.get('CORS_ALLOWED_ORIGINS', [])
    if cors_origins:
        CORS(app, resources={r"/api/*": {"origins": cors_origins}})
    else:
        CORS(app, resources={r"/api/*": {"origins": "*"}})

    if repository is None:
        repository = _connect_repository(app)
    app.extensions['product_service'] = ProductService(repository)

    _register_error_handlers(app)

    @app.route('/', methods=['GET'])
    def root():
        return jsonify({'message': 'Welcome to Product CRUD API'})

    # 注册蓝图
    from productapi.routes.products import products_bp

    app.register_blueprint(products_bp, url_prefix=f"{app.config['API_PREFIX']}/products")

    return app
