from app.urls.auth import auth_bp
from app.urls.account import account_bp
from app.urls.category import category_bp
from app.urls.transaction import transaction_bp
from app.urls.recurring_rule import recurring_rule_bp
from app.urls.budget import budget_bp
from app.urls.goal import goal_bp
from app.urls.dashboard import dashboard_bp
from app.resources.health_check import health_bp


def register_blueprints(app):
    """Registers all Flask Blueprints (URL routing)"""
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(account_bp, url_prefix="/api/accounts")
    app.register_blueprint(category_bp, url_prefix="/api/categories")
    app.register_blueprint(transaction_bp, url_prefix="/api/transactions")
    app.register_blueprint(recurring_rule_bp, url_prefix="/api/recurring-rules")
    app.register_blueprint(budget_bp, url_prefix="/api/budgets")
    app.register_blueprint(goal_bp, url_prefix="/api/goals")
    app.register_blueprint(dashboard_bp, url_prefix="/api/dashboard")
    app.register_blueprint(health_bp, url_prefix="/api")
