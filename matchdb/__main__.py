from . import create_app


def main():
    app = create_app()
    port = app.config["PORT"]

    app.logger.info(f"Frontend server running on http://localhost:{port}")
    app.logger.info(
        f"Connecting to backend API at "
        f"http://{app.config['UPSTREAM_HOST']}:{app.config['UPSTREAM_PORT']}/api"
    )

    app.run(
        host=app.config["HOST"],
        port=port,
        debug=app.config["APP_ENV"] == "development",
    )


if __name__ == "__main__":
    main()
