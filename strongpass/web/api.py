import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from strongpass.checker import StrengthResult, score_password
from strongpass.errors import PasswordPolicyError
from strongpass.generator import generate
from strongpass.suggestions import suggest_improvements

logger = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    if config:
        app.config.update(config)

    @app.route('/')
    def home():
        return jsonify({"message": "StrongPass API is running"})

    @app.route('/generate', methods=['POST'])
    def generate_route():
        try:
            password = generate()
        except PasswordPolicyError as e:
            logger.error("generate failed: %s", e)
            return jsonify({'error': str(e)}), 500
        return jsonify({'password': password})

    @app.route('/score', methods=['POST'])
    def score_route():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({'error': "expected a JSON object"}), 400
        password = data.get('password', '')
        if password is None:
            password = ''
        if not isinstance(password, str):
            return jsonify({'error': "'password' must be a string"}), 400
        return jsonify(score_password(password).to_dict())

    @app.route('/suggestions', methods=['POST'])
    def suggestions_route():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': "expected a JSON object"}), 400
        try:
            result = StrengthResult.from_dict(data)
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        return jsonify({'suggestions': suggest_improvements(result)})

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
