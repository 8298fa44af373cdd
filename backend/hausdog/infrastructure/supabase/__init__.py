from .supabase_auth_client import SupabaseAuthClient, code_verifier_cookie_name

__all__ = ["SupabaseAuthClient", "code_verifier_cookie_name"]
