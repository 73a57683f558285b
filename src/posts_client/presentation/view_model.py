"""
Post View Model Module

Connects the use cases to the state store. Each operation is one logical
step: mark loading, await a single result, apply it.

Overlapping operations are not serialized. When two run at once, the one
that completes last determines the final state.
"""

import asyncio
import logging
from typing import Callable, Coroutine, Optional, Set

import httpx

from ..api.client import PostsAPIClient
from ..config import Config, config
from ..repository.http_repository import HttpPostRepository
from ..usecases.create_post import CreatePostUseCase
from ..usecases.get_all_posts import GetAllPostsUseCase
from .state import (
    CreateFinished,
    CreateStarted,
    FetchFinished,
    FetchStarted,
    MessagesCleared,
    ViewState,
)
from .store import Listener, StateStore


logger = logging.getLogger(__name__)


class PostViewModel:
    """
    View model for the posts screen.

    Owns the ``StateStore``; the UI reads ``state`` or subscribes.
    """

    def __init__(
        self,
        get_all_posts: GetAllPostsUseCase,
        create_post: CreatePostUseCase,
        store: Optional[StateStore] = None,
        api_client: Optional[PostsAPIClient] = None,
        default_user_id: Optional[int] = None
    ):
        """
        Initialize the view model.

        Args:
            get_all_posts: Use case for loading the list.
            create_post: Use case for creating a post.
            store: State store (a fresh one if None).
            api_client: Client closed together with the view model, if any.
            default_user_id: User id used by ``submit_post`` (config default if None).
        """
        self._get_all_posts = get_all_posts
        self._create_post = create_post
        self._store = store or StateStore()
        self._api_client = api_client
        self.default_user_id = (
            default_user_id if default_user_id is not None
            else config.posts.default_user_id
        )
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> ViewState:
        return self._store.state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._store.subscribe(listener)

    @property
    def can_fetch(self) -> bool:
        """Whether the fetch action should be enabled."""
        return not self.state.is_loading

    def can_create(self, title: str, body: str) -> bool:
        """Whether the create action should be enabled for this input."""
        return not self.state.is_loading and bool(title.strip()) and bool(body.strip())

    async def fetch_all_posts(self) -> None:
        """Load every post into the state."""
        self._store.dispatch(FetchStarted())
        result = await self._get_all_posts()
        self._store.dispatch(FetchFinished(result))

    async def create_post(self, user_id: int, title: str, body: str) -> None:
        """
        Create a post and select it.

        The new post is not appended to ``posts``.
        """
        self._store.dispatch(CreateStarted())
        result = await self._create_post(user_id, title, body)
        self._store.dispatch(CreateFinished(result))

    async def submit_post(self, title: str, body: str) -> bool:
        """
        Create a post for the default user if the form may be submitted.

        Returns:
            False if the input was gated out and nothing was sent.
        """
        if not self.can_create(title, body):
            logger.debug("Submit ignored: form not ready")
            return False
        await self.create_post(self.default_user_id, title, body)
        return True

    def clear_messages(self) -> None:
        self._store.dispatch(MessagesCleared())

    def launch_fetch_all_posts(self) -> asyncio.Task:
        """Start ``fetch_all_posts`` in the background. Needs a running loop."""
        return self._launch(self.fetch_all_posts())

    def launch_create_post(self, user_id: int, title: str, body: str) -> asyncio.Task:
        """Start ``create_post`` in the background. Needs a running loop."""
        return self._launch(self.create_post(user_id, title, body))

    def _launch(self, operation: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(operation)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @property
    def pending_operations(self) -> int:
        return len(self._tasks)

    async def aclose(self) -> None:
        """Cancel outstanding operations and release the API client."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            logger.info(f"Cancelling {len(tasks)} pending operation(s)")
            await asyncio.gather(*tasks, return_exceptions=True)

        if self._api_client is not None:
            await self._api_client.aclose()

    async def __aenter__(self) -> "PostViewModel":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def build_view_model(
    app_config: Optional[Config] = None,
    http_client: Optional[httpx.AsyncClient] = None
) -> PostViewModel:
    """
    Construct the full client stack explicitly.

    Args:
        app_config: Configuration (uses the global config if None).
        http_client: Optional pre-built HTTP client, e.g. with a mock transport.

    Returns:
        A view model owning its API client.
    """
    app_config = app_config or config
    api_client = PostsAPIClient(http_client=http_client, api_config=app_config.api)
    repository = HttpPostRepository(api_client)

    return PostViewModel(
        get_all_posts=GetAllPostsUseCase(repository),
        create_post=CreatePostUseCase(repository),
        api_client=api_client,
        default_user_id=app_config.posts.default_user_id
    )
