from dotenv import load_dotenv

from productapi.env_utils import env_int, env_list, env_str

load_dotenv()


class Config:
    """应用配置"""

    # MongoDB 配置 (数据库名取自 URI 路径)
    MONGO_URI = env_str('MONGO_URI', 'mongodb://localhost:27017/productDB')
    MONGO_COLLECTION = env_str('MONGO_COLLECTION', 'products')
    MONGO_TIMEOUT_MS = env_int('MONGO_TIMEOUT_MS', 3000)

    # API 配置
    API_PREFIX = '/api'

    # CORS allowlist (comma-separated origins)
    # Example:
    # CORS_ALLOWED_ORIGINS=https://shop.example.com,https://admin.example.com
    CORS_ALLOWED_ORIGINS = env_list('CORS_ALLOWED_ORIGINS')

    # Flask 环境
    FLASK_ENV = env_str('FLASK_ENV', 'development')

    LOG_LEVEL = env_str('LOG_LEVEL', 'INFO').upper()

    # 监听端口
    PORT = env_int('PORT', 3000)
    PORT_FALLBACK = env_int('PORT_FALLBACK', 3001)


class TestConfig(Config):
    """测试配置 - 仓库由测试注入，不连接 MongoDB"""
    TESTING = True
    CORS_ALLOWED_ORIGINS = []
