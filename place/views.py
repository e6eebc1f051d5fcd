from common.views import render


def canvas(req):
    return render(req, "place/index.html")
