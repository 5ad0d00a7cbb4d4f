from django.urls import path

from server.apps.hostlist.views import hostlist

app_name = 'hostlist'

urlpatterns = [
    path('', hostlist, name='hostlist'),
]
