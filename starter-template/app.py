"""
Showcase Starter Template
=========================

A ready-to-run Flask application serving the portfolio projects API.

Run with:
    JWT_SECRET=change-me python app.py

Visit:
    http://localhost:5000/projects  - Project list
    http://localhost:5000/health    - Health check
"""

import atexit

from flask import Flask
from showcase import Showcase

from config import Config

# Create Flask app
app = Flask(__name__)
app.config.from_object(Config)

# Initialize Showcase - this registers the auth and projects APIs
showcase = Showcase(app)
atexit.register(showcase.close)


# =============================================================================
# Run the app
# =============================================================================

if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Showcase Starter Template")
    print("=" * 60)
    print(f"Projects API:    http://localhost:5000/projects")
    print(f"Admin Login:     POST http://localhost:5000/auth/login")
    print(f"Health:          http://localhost:5000/health")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=5000, debug=not Config.IS_PRODUCTION)
