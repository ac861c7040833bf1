# module easyjatra.app
"""
Instance globale de l'application, construite par la factory.
Les clients Supabase/Stripe sont créés au démarrage (lifespan) depuis l'environnement.
"""
from easyjatra.app_setup.factory import create_app

app = create_app()
