import os
import logging
from flask import Flask, request, jsonify
from flask_cors import CORS

import notion_api
from notion_api import NotionAPIError
from posts import database_summary, post_record, date_update, DATE_PROPERTY

# ----------------------
# Configuration
# ----------------------
PORT = int(os.getenv("PORT", "3000"))
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Logging
def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO

logging.basicConfig(level=resolve_log_level(LOG_LEVEL))
logger = logging.getLogger("notion-proxy")

# ----------------------
# App Setup
# ----------------------
app = Flask(__name__)
CORS(app, origins=FRONTEND_ORIGIN)

# ----------------------
# Helpers
# ----------------------
def get_fields(*names):
    """Pull the named fields from the JSON body; a missing body counts as empty."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    return [data.get(name) for name in names]

# ----------------------
# Endpoints
# ----------------------
@app.route("/", methods=["GET"])
def health_check():
    return "Notion API Proxy is running. Ready to receive POST requests.", 200


@app.route("/api/get-databases", methods=["POST"])
def get_databases():
    (notion_token,) = get_fields("notionToken")
    if not notion_token:
        return jsonify({"error": "Notion token is required."}), 400

    try:
        response = notion_api.search_databases(notion_token)
        databases = [database_summary(db) for db in response["results"]]
    except NotionAPIError as e:
        logger.error("Error fetching databases: %s", e)
        return jsonify({"error": "Failed to fetch databases from Notion. Check your token and permissions."}), 500
    except Exception as e:
        logger.exception("Error fetching databases: %s", e)
        return jsonify({"error": "Failed to fetch databases from Notion. Check your token and permissions."}), 500

    return jsonify(databases)


@app.route("/api/get-posts", methods=["POST"])
def get_posts():
    notion_token, database_id = get_fields("notionToken", "databaseId")
    if not notion_token or not database_id:
        return jsonify({"error": "Notion token and Database ID are required."}), 400

    # Only the first page of results is returned
    try:
        response = notion_api.query_database(
            notion_token,
            database_id,
            sorts=[{"property": DATE_PROPERTY, "direction": "ascending"}]
        )
        posts = [post_record(page) for page in response["results"]]
    except NotionAPIError as e:
        logger.error("Error fetching posts: %s", e)
        return jsonify({"error": "Failed to fetch posts from Notion. Check database ID and ensure integration has access."}), 500
    except Exception as e:
        logger.exception("Error fetching posts: %s", e)
        return jsonify({"error": "Failed to fetch posts from Notion. Check database ID and ensure integration has access."}), 500

    return jsonify(posts)


@app.route("/api/update-post-date", methods=["POST"])
def update_post_date():
    notion_token, page_id, new_date = get_fields("notionToken", "pageId", "newDate")
    if not notion_token or not page_id or not new_date:
        return jsonify({"error": "Token, Page ID, and new date are required."}), 400

    try:
        notion_api.update_page(notion_token, page_id, date_update(new_date))
    except NotionAPIError as e:
        logger.error("Error updating post date: %s", e)
        return jsonify({"error": "Failed to update post date in Notion."}), 500
    except Exception as e:
        logger.exception("Error updating post date: %s", e)
        return jsonify({"error": "Failed to update post date in Notion."}), 500

    return jsonify({"success": True, "message": f"Post {page_id} updated to {new_date}"})


if __name__ == "__main__":
    logger.info("Notion proxy server is listening on port %d", PORT)
    app.run(host="0.0.0.0", port=PORT)
