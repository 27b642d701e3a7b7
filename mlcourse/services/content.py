"""
Course content: the topic / sub-topic tree and the static lesson blocks.

Structure of TOPICS:
  key        : level slug, also the quiz level mounted by the "Quiz" sub-topic
  title      : label shown in the topic list
  subtopics  : ordered sub-topic keys; each key is what the page receives

LESSONS maps (level, sub-topic key) to an HTML block. A sub-topic without a
lesson renders only its heading.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mlcourse.services.progress import Level

QUIZ_KEY = "Quiz"

TOPICS: list[dict[str, Any]] = [
    {
        "key": Level.FOUNDATION.value,
        "title": "Foundation",
        "subtopics": ["How Do I Get Started?", "Step-by-Step Process", QUIZ_KEY],
    },
    {
        "key": Level.BEGINNER.value,
        "title": "Beginner",
        "subtopics": ["Python Skills", "Understand ML Algorithms", QUIZ_KEY],
    },
    {
        "key": Level.INTERMEDIATE.value,
        "title": "Intermediate",
        "subtopics": ["Code ML Algorithms", QUIZ_KEY],
    },
    {
        "key": Level.ADVANCE.value,
        "title": "Advance",
        "subtopics": ["Natural Language (Text)", "Computer Vision", QUIZ_KEY],
    },
]

_TOPICS_BY_KEY = {topic["key"]: topic for topic in TOPICS}

LESSONS: dict[tuple[str, str], str] = {
    # ═══════════════════════════ FOUNDATION ═══════════════════════════════
    (Level.FOUNDATION.value, "How Do I Get Started?"): """
<h3>Introduction to Machine Learning</h3>
<p>Machine learning is a branch of artificial intelligence that enables computers to learn from data and
make decisions or predictions without being explicitly programmed. It has applications across various
domains, including healthcare, finance, and marketing.</p>
""",
    # ═══════════════════════════ BEGINNER ═════════════════════════════════
    (Level.BEGINNER.value, "Python Skills"): """
<h2>Python Skills for Machine Learning</h2>
""",
    (Level.BEGINNER.value, "Understand ML Algorithms"): """
<h2>Understanding Machine Learning Algorithms</h2>
<p>Machine learning algorithms are the heart of any data-driven problem-solving process. Each algorithm
has its strengths, weaknesses, and ideal use cases. Understanding the underlying principles and
mechanisms of these algorithms is essential for selecting the right one for a given task and optimizing
its performance.</p>

<h3>Foundation Concepts</h3>
<p>Before delving into specific algorithms, it's important to grasp the foundational concepts of machine
learning, including:</p>
<ul>
  <li><strong>Supervised Learning:</strong> Algorithms that learn from labeled data, where each example in
  the training dataset is associated with a target label.</li>
  <li><strong>Unsupervised Learning:</strong> Algorithms that find patterns and structure in unlabelled
  data, without explicit supervision.</li>
</ul>

<h3>Common Algorithms</h3>
<ul>
  <li><strong>Linear Regression:</strong> A simple and widely used regression algorithm for modeling the
  relationship between a dependent variable and one or more independent variables. Linear regression
  uses the relationship between the data points to draw a straight line through all of them. This line
  can be used to predict future values.</li>
  <li><strong>Logistic Regression:</strong> A regression algorithm used for binary classification tasks,
  where the output is a probability that an instance belongs to a particular class.</li>
  <li><strong>K-Means Clustering:</strong> An unsupervised learning algorithm that partitions data into
  clusters based on similarity, with the goal of minimizing intra-cluster variance.</li>
  <li><strong>Neural Networks:</strong> Deep learning algorithms inspired by the structure and function of
  the human brain, capable of learning complex patterns from data.</li>
</ul>
<p>In the linear regression example, the x-axis represents age and the y-axis represents speed: we
registered the age and speed of 13 cars as they were passing a tollbooth, and check whether the data
could be used in a linear regression.</p>
<pre><code>import matplotlib.pyplot as plt
from scipy import stats

x = [5, 7, 8, 7, 2, 17, 2, 9, 4, 11, 12, 9, 6]
y = [99, 86, 87, 88, 111, 86, 103, 87, 94, 78, 77, 85, 86]

slope, intercept, r, p, std_err = stats.linregress(x, y)
model = [slope * v + intercept for v in x]

plt.scatter(x, y)
plt.plot(x, model)
plt.show()</code></pre>

<h2>Neural Networks</h2>
<p><strong>Neural Networks</strong> are deep learning algorithms inspired by the structure and function of
the human brain, capable of learning complex patterns from data. They are often referred to as
<strong>Artificial Neural Networks (ANN)</strong>.</p>
<p>Neural Networks are essentially multi-layer Perceptrons; the perceptron defines the first step into the
world of multi-layered neural networks. They are at the core of Deep Learning and solve problems that
cannot be solved by traditional algorithms:</p>
<ul>
  <li>Medical Diagnosis</li>
  <li>Face Detection</li>
  <li>Voice Recognition</li>
</ul>

<h2>The Neural Network Model</h2>
<p>Input data (Yellow) are processed against a hidden layer (Blue) and modified against another hidden
layer (Green) to produce the final output (Red).</p>

<h2>Machine Learning - Train/Test</h2>
<h3>Evaluate Your Model</h3>
<p>In Machine Learning we create models to predict the outcome of certain events. To measure if the model
is good enough, we can use a method called Train/Test.</p>
<h3>What is Train/Test</h3>
<p>Train/Test is a method to measure the accuracy of your model. It is called Train/Test because you split
the data set into two sets: a training set and a testing set.</p>
<p><b>80% for training, and 20% for testing.</b></p>
<p>You train the model using the training set. You test the model using the testing set. Train the model
means create the model. Test the model means test the accuracy of the model.</p>
<h3>Start With a Data Set</h3>
<p>Start with a data set you want to test. Our data set illustrates 100 customers in a shop, and their
shopping habits.</p>
<pre><code>import numpy
import matplotlib.pyplot as plt

numpy.random.seed(2)
x = numpy.random.normal(3, 1, 100)
y = numpy.random.normal(150, 40, 100) / x

train_x, train_y = x[:80], y[:80]
test_x, test_y = x[80:], y[80:]

plt.scatter(train_x, train_y)
plt.show()</code></pre>
""",
    # ═══════════════════════════ INTERMEDIATE ═════════════════════════════
    (Level.INTERMEDIATE.value, "Code ML Algorithms"): """
<h2>Code the algorithms</h2>
<p>Understanding and implementing machine learning algorithms from scratch is a valuable skill for gaining
deeper insights into how these algorithms work. Coding ML algorithms helps in grasping the underlying
mathematical concepts and the intricacies involved in their execution.</p>
<h3>Why code algorithms?</h3>
<p>Coding machine learning algorithms from scratch offers several benefits:</p>
<ul>
  <li><strong>Deep Understanding:</strong> Writing algorithms from scratch helps you understand the core
  principles, mathematical foundations, and assumptions behind each algorithm.</li>
  <li><strong>Customization:</strong> Implementing your own algorithms allows you to customize and tweak
  them to suit specific needs and datasets.</li>
  <li><strong>Debugging Skills:</strong> Building algorithms from the ground up improves your debugging
  skills and enhances your ability to identify and fix issues in complex codebases.</li>
  <li><strong>Performance Optimization:</strong> Understanding the inner workings of algorithms helps you
  optimize their performance, leading to more efficient and faster models.</li>
</ul>
""",
    # ═══════════════════════════ ADVANCE ══════════════════════════════════
    (Level.ADVANCE.value, "Natural Language (Text)"): """
<h2>Natural Language Processing (NLP)</h2>
<p>Natural Language Processing (NLP) is a subfield of artificial intelligence (AI) that focuses on the
interaction between computers and human languages. NLP techniques enable computers to understand,
interpret, and generate human language in a way that is both meaningful and useful.</p>
<h3>Key Tasks in Natural Language Processing</h3>
<p>NLP encompasses a wide range of tasks, including:</p>
<ul>
  <li><strong>Text Classification:</strong> Categorizing text documents into predefined classes or
  categories, such as spam detection, sentiment analysis, and topic classification.</li>
  <li><strong>Named Entity Recognition (NER):</strong> Identifying and extracting named entities, such as
  names of people, organizations, locations, dates, and numerical expressions, from unstructured text.</li>
</ul>
""",
    (Level.ADVANCE.value, "Computer Vision"): """
<h2>Computer Vision</h2>
<p>Computer vision is a field of artificial intelligence that enables computers to interpret and understand
visual information from the real world. By mimicking the human visual system, computer vision systems can
analyze images and videos, extract meaningful insights, and make intelligent decisions based on visual
data.</p>
<h3>Key Concepts in Computer Vision</h3>
<p>Computer vision involves several key concepts and techniques:</p>
<ul>
  <li><strong>Image Processing:</strong> Image processing techniques are used to enhance, manipulate, and
  analyze digital images, including operations such as filtering, edge detection, segmentation, and
  feature extraction.</li>
  <li><strong>Feature Extraction:</strong> Feature extraction involves identifying and extracting relevant
  visual features from images, such as edges, corners, textures, and keypoints, to represent and
  characterize objects or regions of interest.</li>
</ul>
<h3>Applications of Computer Vision</h3>
<p>Computer vision has numerous applications across various industries and domains, including:</p>
<ul>
  <li><strong>Autonomous Vehicles:</strong> Computer vision is used in autonomous vehicles for lane
  detection, object detection, pedestrian detection, traffic sign recognition, and scene understanding to
  enable safe and efficient navigation.</li>
  <li><strong>Surveillance and Security:</strong> Computer vision systems monitor and analyze surveillance
  footage for threat detection, activity recognition, crowd counting, and anomaly detection in public
  spaces, airports, and critical infrastructure.</li>
</ul>
""",
}


@dataclass(frozen=True)
class ContentView:
    """What the right-hand pane shows for the current selection."""

    level: str
    heading: str
    html: str | None = None
    quiz_level: str | None = None


def get_topic(key: str | None) -> dict[str, Any] | None:
    return _TOPICS_BY_KEY.get(key) if key else None


def toggle_topic(active: str | None, topic: str) -> str | None:
    """Selecting the open topic closes it; any other topic replaces it."""
    return None if active == topic else topic


def resolve_content(level: str, key: str | None) -> ContentView | None:
    """Match a sub-topic key against the level's known lessons.

    Returns None when no topic is open. Unknown keys still produce a view
    carrying only the heading.
    """
    if get_topic(level) is None:
        return None
    key = key or ""
    if key == QUIZ_KEY:
        return ContentView(level=level, heading=key, quiz_level=level)
    return ContentView(level=level, heading=key, html=LESSONS.get((level, key)))
