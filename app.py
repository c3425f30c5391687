from flask import (
    Flask, request, render_template,
    redirect, url_for, jsonify
)
from pydantic import ValidationError

# =============================
# IMPORT EXISTING MODULES
# =============================
from config import SECRET_KEY, PORT
from collector import MISSING_FIELDS_MESSAGE, LessonPlanCollector, Phase

# =============================
# FLASK INITIALIZATION
# =============================
app = Flask(__name__)
app.secret_key = SECRET_KEY


# =============================
# PAGE ROUTES
# =============================
@app.get("/")
def home():
    return redirect(url_for("lessonplanner"))


@app.route("/lessonplanner", methods=["GET", "POST"])
def lessonplanner():
    if request.method == "POST":
        collector = LessonPlanCollector.from_mapping(request.form).submit()
    else:
        collector = LessonPlanCollector()

    return render_template("lessonplanner.html", state=collector)


# =============================
# API ROUTES
# =============================
@app.post("/api/lessonplan")
def api_lessonplan():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    collector = LessonPlanCollector.from_mapping(data)

    try:
        collector.build_request()
    except ValidationError:
        return jsonify({"error": MISSING_FIELDS_MESSAGE}), 400

    collector.submit()
    status = 502 if collector.phase is Phase.FAILED else 200
    return jsonify(collector.to_dict()), status


# =============================
# ENTRY POINT
# =============================
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=PORT, debug=False)
