# ============================================
# projects/clients/user_client.py
# ============================================
import logging
import requests
from typing import List, Dict, Optional
from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

USER_FIELDS = ('id', 'name', 'email')


class UserServiceClient:
    """
    Client to communicate with the User Service API.

    Users live outside this service; they are only looked up to show
    names next to ids. Lookups are disabled when USER_SERVICE_URL is unset
    and failures never break the calling request.
    """

    CACHE_TTL = 300  # 5 minutes
    TIMEOUT = 5

    @classmethod
    def base_url(cls) -> Optional[str]:
        url = getattr(settings, 'USER_SERVICE_URL', None)
        return url.rstrip('/') if url else None

    @staticmethod
    def _public(user: Dict) -> Dict:
        return {field: user.get(field) for field in USER_FIELDS}

    @classmethod
    def get_user(cls, user_id: str) -> Optional[Dict]:
        """Get single user by ID"""
        base_url = cls.base_url()
        if not base_url:
            return None

        cache_key = f"user:{user_id}"
        cached = cache.get(cache_key)
        if cached:
            return cached

        try:
            response = requests.get(f"{base_url}/users/{user_id}", timeout=cls.TIMEOUT)
            response.raise_for_status()
            user_data = cls._public(response.json())
        except (requests.RequestException, ValueError) as e:
            logger.warning("[users] Error fetching user %s: %s", user_id, e)
            return None

        cache.set(cache_key, user_data, cls.CACHE_TTL)
        return user_data

    @classmethod
    def get_users_by_ids(cls, user_ids: List[str]) -> Dict[str, Dict]:
        """
        Batch get users by IDs
        Returns dict: {user_id: user_data}
        """
        base_url = cls.base_url()
        if not user_ids or not base_url:
            return {}

        users_dict = {}
        ids_to_fetch = []

        # Check cache first
        for user_id in set(user_ids):
            cached = cache.get(f"user:{user_id}")
            if cached:
                users_dict[user_id] = cached
            else:
                ids_to_fetch.append(user_id)

        if not ids_to_fetch:
            return users_dict

        try:
            response = requests.post(
                f"{base_url}/users/batch",
                json={'ids': ids_to_fetch},
                timeout=cls.TIMEOUT
            )
            response.raise_for_status()
            fetched_users = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("[users] Error batch fetching %s users: %s", len(ids_to_fetch), e)
            return users_dict

        for user in fetched_users:
            user_id = str(user['id'])
            user_data = cls._public(user)
            users_dict[user_id] = user_data
            cache.set(f"user:{user_id}", user_data, cls.CACHE_TTL)

        return users_dict
