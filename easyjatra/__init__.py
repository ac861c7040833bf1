"""EasyJatra: API de vente de billets de transport (FastAPI, Supabase, Stripe)."""
