"""
Registre central des routers (tickets, paiements, commandes, utilisateurs, vendeurs, admin, health).
"""
from fastapi import FastAPI
from easyjatra.tickets import views as tickets_views
from easyjatra.payments import views as payments_views
from easyjatra.orders import views as orders_views
from easyjatra.users import views as users_views
from easyjatra.vendors import views as vendors_views
from easyjatra.admin.views import router as admin_router
from easyjatra.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l'application.
    - L'ordre n'a pas d'impact sauf conflits de chemins.
    """
    app.include_router(tickets_views.router)
    app.include_router(payments_views.router)
    app.include_router(orders_views.router)
    app.include_router(users_views.router)
    app.include_router(vendors_views.router)
    app.include_router(admin_router)
    app.include_router(health_router)
