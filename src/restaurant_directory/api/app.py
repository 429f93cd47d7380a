"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from restaurant_directory.api.restaurants import router as restaurants_router
from restaurant_directory.app_logging import configure_logging
from restaurant_directory.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        session = await state_container.session_gate.resolve_session()
        if session is None:
            logger.info("No authenticated session; create is disabled")
        await state_container.record_sync.list_all()
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(restaurants_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Single-page form that consumes the restaurant API."""
        return HTMLResponse(_INDEX_HTML)

    return app


_INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Restaurant Directory</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .card { max-width: 600px; margin: 0 auto; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 100%; box-sizing: border-box; }
      button { padding: 0.4rem 0.8rem; }
      li { display: flex; justify-content: space-between; margin: 0.3rem 0; }
    </style>
  </head>
  <body>
    <div class="card">
      <h1>Welcome to the Restaurant Directory</h1>
      <div id="signed-out" hidden>
        <p>Please sign in to add restaurants.</p>
        <form id="sign-in-form">
          <div class="row">
            <label for="email">E-mail</label>
            <input id="email" type="email" placeholder="E-mail" required />
          </div>
          <div class="row">
            <label for="password">Password</label>
            <input id="password" type="password" placeholder="Password" required />
          </div>
          <button type="submit">Sign In</button>
        </form>
      </div>
      <div id="signed-in" hidden>
        <p id="welcome"></p>
        <h2>Create a New Restaurant</h2>
        <form id="create-form">
          <div class="row">
            <label for="name">Restaurant Name</label>
            <input id="name" placeholder="Restaurant Name" required />
          </div>
          <div class="row">
            <label for="description">Description</label>
            <input id="description" placeholder="Description" required />
          </div>
          <button type="submit">Add Restaurant</button>
        </form>
      </div>
      <div id="restaurant-list">
        <h2>Restaurants</h2>
        <ul id="restaurants"></ul>
      </div>
      <button id="sign-out" hidden>Sign Out</button>
    </div>
    <script>
      function render(state) {
        document.getElementById('signed-out').hidden = state.authenticated;
        document.getElementById('signed-in').hidden = !state.authenticated;
        document.getElementById('sign-out').hidden = !state.authenticated;
        if (state.session) {
          document.getElementById('welcome').textContent =
            'Welcome, ' + state.session.display_label + '!';
        }
        document.getElementById('name').value = state.draft.name;
        document.getElementById('description').value = state.draft.description;
        const list = document.getElementById('restaurants');
        list.replaceChildren();
        for (const restaurant of state.restaurants) {
          const item = document.createElement('li');
          const label = document.createElement('span');
          label.textContent = restaurant.name + ' - ' + restaurant.description;
          item.append(label);
          if (state.authenticated) {
            const remove = document.createElement('button');
            remove.textContent = 'Remove';
            remove.onclick = () => call('DELETE', '/restaurants/' + restaurant.id);
            item.append(remove);
          }
          list.append(item);
        }
      }

      async function call(method, path, body) {
        const res = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined,
        });
        const data = await res.json();
        render(data.state || data);
      }

      document.getElementById('sign-in-form').onsubmit = (event) => {
        event.preventDefault();
        call('POST', '/session/sign-in', {
          email: document.getElementById('email').value,
          password: document.getElementById('password').value,
        });
      };
      document.getElementById('create-form').onsubmit = (event) => {
        event.preventDefault();
        call('POST', '/restaurants', {
          name: document.getElementById('name').value,
          description: document.getElementById('description').value,
        });
      };
      document.getElementById('sign-out').onclick = () =>
        call('POST', '/session/sign-out');
      call('GET', '/state');
    </script>
  </body>
</html>
"""
