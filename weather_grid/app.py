from flask import Flask, jsonify, request, Response

from weather_grid.common import get_logger, setup_logging
from weather_grid.errors import FileOpenError
from weather_grid.map.render import MapKind, render_map
from weather_grid.weather.config import WEB_HOST, WEB_PORT
from weather_grid.weather.session import WeatherSession

logger = get_logger(__name__)

app = Flask(__name__)
app.config['WEATHER_SESSION'] = WeatherSession()


def current_session() -> WeatherSession:
    return app.config['WEATHER_SESSION']


def not_loaded():
    return jsonify({"error": "No configuration file has been processed yet"}), 409


@app.route('/load', methods=['POST'])
def load():
    """Read a configuration file into a fresh session"""
    data = request.get_json(silent=True) or {}
    config_path = data.get('config')
    if not config_path:
        return jsonify({"error": "Missing 'config' path"}), 400

    session = WeatherSession()
    try:
        session.load(config_path)
    except FileOpenError as e:
        return jsonify({"error": str(e)}), 404

    app.config['WEATHER_SESSION'] = session
    return jsonify({
        'statistics': session.grid.get_statistics(),
        'total_cities': len(session.registry),
        'errors': [str(e) for e in session.errors],
    })


@app.route('/grid')
def get_grid():
    """Return every cell of the loaded grid"""
    session = current_session()
    if not session.processed:
        return not_loaded()
    return jsonify(session.grid.to_dict())


@app.route('/cities')
def get_cities():
    """Return bounding boxes and averages for every city"""
    session = current_session()
    if not session.processed:
        return not_loaded()
    return jsonify([city.to_dict() for city in session.registry])


@app.route('/summary')
def get_summary():
    """Return the weather forecast summary"""
    session = current_session()
    if not session.processed:
        return not_loaded()
    summary = session.summary().reset_index()
    return Response(summary.to_json(orient='records'), mimetype='application/json')


@app.route('/map/<kind>')
def get_map(kind):
    """ASCII map as plain text, kind is one of city, cloud_index, cloud_lmh, pressure_index, pressure_lmh"""
    session = current_session()
    if not session.processed:
        return not_loaded()
    try:
        map_kind = MapKind[kind.upper()]
    except KeyError:
        return jsonify({"error": f"Unknown map kind '{kind}'"}), 400
    return Response(render_map(session.grid, map_kind), mimetype='text/plain')


def main():
    setup_logging()
    logger.info("Starting web view on %s:%s", WEB_HOST, WEB_PORT)
    app.run(host=WEB_HOST, port=WEB_PORT, debug=False)


if __name__ == '__main__':
    main()
