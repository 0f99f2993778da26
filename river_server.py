from flask import Flask
from flask_cors import CORS

import config
from streaming.routes import river


# ---------- App ----------
def create_app():

    app = Flask(__name__)

    CORS(app, origins=config.CORS_ORIGINS)

    app.register_blueprint(river)

    # ---------- Health ----------
    @app.route("/health")
    def health_check():
        return "howdy 🤠"

    return app


app = create_app()

# ---------- Run ----------
if __name__ == "__main__":
    print(f"[RIVER] Listening on {config.HOST}:{config.PORT}")
    app.run(
        host=config.HOST,
        port=config.PORT,
        debug=config.DEBUG,
        threaded=True
    )
