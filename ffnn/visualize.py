import matplotlib.pyplot as plt


DEFAULT_TITLE = "Neural Network (Abalone Data) Error"


def plot_error_history(
        error_history, filename='error.png', title=DEFAULT_TITLE, size=4.0,
        line_kwargs=dict(color='g', ls='-', lw=1),
        marker_kwargs=dict(color='r', marker='^', ls='none', ms=4)):
    """ Plot the recorded training errors and save the chart to an image

    Parameters
    ----------
    error_history: sequence of float
        The errors in the order they were recorded. The i'th value is
        plotted at x = i.

    filename: str, default='error.png'
        The image file. The format follows the file extension.

    title: str
        The chart title.

    size: float, default=4.0
        Width and height of the figure in inches.

    line_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`
        for the connecting line.

    marker_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`
        for the point markers.

    Returns
    -------
    filename: str
    """
    errors = list(error_history)
    if len(errors) == 0:
        raise ValueError("`error_history` is empty; nothing to plot.")

    iterations = range(len(errors))

    fig = plt.figure(figsize=(size, size))
    ax = fig.add_subplot(111)

    line = ax.plot(iterations, errors, **line_kwargs)[0]
    points = ax.plot(iterations, errors, **marker_kwargs)[0]

    ax.set_title(title)
    ax.set_xlabel("Iterations")
    ax.set_ylabel("Error")
    ax.legend([(line, points)], ["line points"])

    fig.savefig(filename)
    plt.close(fig)

    return filename
