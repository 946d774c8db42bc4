# tokenplot/app.py
import logging
import os

from flask import Flask, render_template_string, request

from tokenplot.errors import EmptyTokenSequenceError, MissingInputError, TokenPlotError
from tokenplot.sentence_history import SentenceHistory
from tokenplot.sentence_tokenizer import WordTokenizer
from tokenplot.settings import get_settings
from tokenplot.token_stats import build_plot_points, format_prediction, plot_series, predict_token_length

logger = logging.getLogger("tokenplot")

PUBLIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "public")


# --------------------- LOGGING ---------------------
def configure_logging(level="INFO"):
    logging.basicConfig(level=level, format="[%(asctime)s] %(levelname)s - %(message)s")
    logger.setLevel(level)


# --------------------- HTML TEMPLATES ---------------------
PAGE_HEAD = '''<meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Tokenize, Plot and Predict</title>
    <link href="https://cdn.jsdelivr.net/npm/tailwindcss@2.2.19/dist/tailwind.min.css" rel="stylesheet">
    <link href="{{ url_for('static', filename='styles.css') }}" rel="stylesheet">'''

HOME_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
    ''' + PAGE_HEAD + '''
</head>
<body class="min-h-screen flex flex-col items-center justify-center space-y-6">

    <div class="container w-full max-w-md">
        <h1 class="title bounce text-center mb-6">Tokenize, Plot &amp; Predict</h1>
        <p class="description text-center">Enter a sentence below to see its tokens, visualize the results, and predict the next token length.</p>
        <form action="{{ url_for('tokenize') }}" method="post" class="space-y-4">
            <label for="sentence" class="block text-gray-700 font-semibold">Enter a sentence:</label>
            <input type="text" id="sentence" name="sentence" class="w-full px-4 py-2 border rounded-md text-gray-800" placeholder="Type your sentence here" required />
            <button type="submit" class="w-full font-bold py-2 px-4 rounded">
                Tokenize, Plot &amp; Predict
            </button>
            <a href="{{ url_for('home') }}" class="reset-link text-center block mt-2">Reset</a>
        </form>
    </div>

    <div class="container w-full max-w-md mt-6">
        <h2 class="text-xl font-semibold mb-4 text-center">Previous Inputs</h2>
        {% if sentences %}
        <ul class="list-disc list-inside text-gray-700">
            {% for sentence in sentences %}
            <li>{{ sentence }}</li>
            {% endfor %}
        </ul>
        {% else %}
        <p class="text-gray-500 text-center">No previous inputs yet.</p>
        {% endif %}
    </div>

</body>
</html>
'''

RESULT_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
    ''' + PAGE_HEAD + '''
    <script src="https://cdn.plot.ly/plotly-2.35.2.min.js" charset="utf-8"></script>
</head>
<body class="min-h-screen flex flex-col items-center justify-center space-y-4">
    <div class="container w-full max-w-3xl fade-in">
        <h1 class="title pulse text-center mb-6">3D Token Plot</h1>

        <div class="mb-4 text-gray-700">
            <p><strong>Sentence:</strong> <span id="sentence">{{ sentence }}</span></p>
            <p><strong>Tokens ({{ tokens|length }}):</strong>
                {% for token in tokens %}<span class="token">{{ token }}</span>{% endfor %}
            </p>
            <p><strong>Predicted next token length:</strong> <span id="prediction">{{ prediction }}</span></p>
        </div>

        <div id="plot" class="h-96"></div>

        <button id="clearPlotBtn" class="mt-4">Clear Plot</button>
    </div>

    <a href="{{ url_for('home') }}" class="button-link mt-4">Try another plot</a>

    <script>
        const series = {{ series|tojson }};

        function plotTokens() {
            const trace = {
                x: series.x,
                y: series.y,
                z: series.z,
                mode: 'markers+text',
                marker: {
                    size: 12,
                    color: '#ff5f6d',
                    line: { color: '#ffc371', width: 2 },
                    opacity: 0.9
                },
                text: series.text,
                textposition: 'top center',
                type: 'scatter3d'
            };

            const layout = {
                title: '3D Token Plot with Labels',
                autosize: true,
                scene: {
                    xaxis: { title: 'Token Index', color: '#333' },
                    yaxis: { title: 'Token Length', color: '#333' },
                    zaxis: { title: 'Random Z', color: '#333' }
                }
            };

            Plotly.newPlot('plot', [trace], layout);
        }

        document.getElementById('clearPlotBtn').addEventListener('click', function() {
            Plotly.purge('plot');
        });

        plotTokens();
    </script>
</body>
</html>
'''

ERROR_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
    ''' + PAGE_HEAD + '''
</head>
<body class="min-h-screen flex flex-col items-center justify-center space-y-4">
    <div class="container w-full max-w-md">
        <h1 class="title text-center mb-6">Could not tokenize</h1>
        <p class="description text-center" id="error">{{ message }}</p>
    </div>
    <a href="{{ url_for('home') }}" class="button-link mt-4">Try again</a>
</body>
</html>
'''


# --------------------- REQUEST INPUT ---------------------
def read_sentence(req):
    """Pull ``sentence`` from a form body, falling back to a JSON object body."""
    sentence = req.form.get("sentence")
    if sentence is None and req.is_json:
        payload = req.get_json(silent=True)
        if isinstance(payload, dict):
            sentence = payload.get("sentence")
    if not isinstance(sentence, str) or sentence == "":
        raise MissingInputError()
    return sentence


# --------------------- APP FACTORY ---------------------
def create_app(settings=None, history=None, tokenizer=None, rng=None):
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    history = history if history is not None else SentenceHistory(settings.history_size)
    tokenizer = tokenizer or WordTokenizer()

    app = Flask(__name__, static_folder=PUBLIC_DIR, static_url_path="")

    @app.errorhandler(TokenPlotError)
    def handle_tokenplot_error(error):
        logger.warning("Rejected submission (%s): %s", error.status_code, error.message)
        return render_template_string(ERROR_TEMPLATE, message=error.message), error.status_code

    @app.route("/", methods=["GET"])
    def home():
        return render_template_string(HOME_TEMPLATE, sentences=history.snapshot())

    @app.route("/tokenize", methods=["POST"])
    def tokenize():
        sentence = read_sentence(request)
        tokens = tokenizer.tokenize(sentence)
        if not tokens:
            raise EmptyTokenSequenceError()

        history.add(sentence)

        points = build_plot_points(tokens, rng=rng)
        prediction = predict_token_length(tokens)
        logger.info(
            "Tokenized submission: tokens=%s prediction=%s history_size=%s",
            len(tokens),
            format_prediction(prediction),
            len(history),
        )

        return render_template_string(
            RESULT_TEMPLATE,
            sentence=sentence,
            tokens=tokens,
            prediction=format_prediction(prediction),
            series=plot_series(points),
        )

    return app


def main():
    settings = get_settings()
    app = create_app(settings)
    logger.info("App listening at http://%s:%s", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
