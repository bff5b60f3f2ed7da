from flask import Blueprint, current_app, jsonify, request

from productapi.services.product_service import ProductService

products_bp = Blueprint('products', __name__)


def _service() -> ProductService:
    return current_app.extensions['product_service']


def _product_response(message, product, status=200):
    return jsonify({
        'success': True,
        'message': message,
        'product': product.to_dict()
    }), status


@products_bp.route('', methods=['POST'])
def create_product():
    """创建商品"""
    product = _service().create_product(request.get_json(silent=True))
    return _product_response('Product created successfully', product, 201)


@products_bp.route('', methods=['GET'])
def list_products():
    """获取全部商品（不分页）"""
    products = _service().list_products()
    return jsonify({
        'success': True,
        'message': 'Products retrieved successfully',
        'count': len(products),
        'products': [p.to_dict() for p in products]
    })


@products_bp.route('/<product_id>', methods=['GET'])
def get_product(product_id):
    """获取商品详情"""
    product = _service().get_product(product_id)
    return _product_response('Product retrieved successfully', product)


@products_bp.route('/<product_id>', methods=['PUT'])
def update_product(product_id):
    """更新商品 - 只替换请求中提供的字段"""
    product = _service().update_product(product_id, request.get_json(silent=True))
    return _product_response('Product updated successfully', product)


@products_bp.route('/<product_id>', methods=['DELETE'])
def delete_product(product_id):
    """删除商品，返回删除前的最后状态"""
    product = _service().delete_product(product_id)
    return _product_response('Product deleted successfully', product)
