"""Toggle API - Presentation Layer"""
from flask import Response
from flask_restful import Resource
from booktoggle.api.control_panel import CONTROL_PANEL_HTML
from booktoggle.exceptions.error_handler import handle_service_error
from booktoggle.services.toggle_controller import ToggleController

class ControlPanel(Resource):
    def get(self):
        return Response(CONTROL_PANEL_HTML, mimetype="text/html")

class ToggleStatus(Resource):
    def __init__(self, controller: ToggleController):
        self.controller = controller

    def get(self):
        """Current document count"""
        try:
            return self.controller.status(), 200
        except Exception as e:
            return handle_service_error(e)

class ToggleOn(Resource):
    def __init__(self, controller: ToggleController):
        self.controller = controller

    def post(self):
        """Load the seed dataset into the empty collection"""
        try:
            return self.controller.activate(), 200
        except Exception as e:
            return handle_service_error(e)

class ToggleOff(Resource):
    def __init__(self, controller: ToggleController):
        self.controller = controller

    def post(self):
        """Delete every document from the collection"""
        try:
            return self.controller.deactivate(), 200
        except Exception as e:
            return handle_service_error(e)
