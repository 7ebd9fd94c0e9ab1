from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        admin = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        session["admin_id"] = admin.admin_id
        session["email"] = admin.email
        return jsonify({"success": True, "admin": {"admin_id": admin.admin_id, "email": admin.email}})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/admins", methods=["GET"], endpoint="list_admins")
    @login_required
    def list_admins():
        admins = container.admin_service.list_admins()
        return jsonify({"success": True, "admins": [a.as_dict() for a in admins]})

    @app.route("/admins", methods=["POST"], endpoint="add_admin")
    @login_required
    def add_admin():
        data = json_body()
        admin_id = container.admin_service.create_admin(
            email=data.get("email", ""),
            password=data.get("password", ""),
        )
        return jsonify({"success": True, "admin_id": admin_id, "message": "Admin created"}), 201

    @app.route("/admins/<admin_id>", methods=["DELETE"], endpoint="delete_admin")
    @login_required
    def delete_admin(admin_id: str):
        container.admin_service.delete_admin(admin_id)
        return jsonify({"success": True, "message": "Admin record deleted"})
