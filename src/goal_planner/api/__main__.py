# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Entry point for running the API as a module: python -m goal_planner.api
"""
from .app import app, HOST, PORT

if __name__ == '__main__':
    app.run(host=HOST, port=PORT, debug=False)
