from __future__ import annotations

from flask import Flask, session

from ..common.web import current_user_id, json_body, login_required
from ..container import Container
from ..core.exceptions import NotFoundError
from .service import SessionUser


def register(app: Flask, container: Container) -> None:
    def _start_session(s_user: SessionUser) -> dict:
        session.clear()
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        return {"user_id": s_user.user_id, "username": s_user.username}

    @app.route("/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_body()
        s_user = container.auth_service.signup(data.get("username", ""), data.get("password", ""))
        return _start_session(s_user), 201

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        return _start_session(s_user)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return {"ok": True}

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        user = container.users_repo.get_by_id(current_user_id())
        if not user:
            session.clear()
            raise NotFoundError("User no longer exists")
        return {"user_id": user.user_id, "username": user.username}
