from .models import KubernetesCluster, PaginatedKubernetesClusters, decode
from .transport import Transport, api_call
from .utils import find_one


class KubernetesAPI:
    def __init__(self, transport: Transport):
        self.transport = transport

    @api_call('kubernetes cluster', 'list')
    async def list_kubernetes_clusters(self) -> PaginatedKubernetesClusters:
        """
        first page of clusters only, no pagination
        """
        resp = await self.transport.get('/v2/kubernetes/clusters')
        return decode(PaginatedKubernetesClusters, resp)

    async def find_kubernetes_cluster(self, search: str) -> KubernetesCluster:
        clusters = await self.list_kubernetes_clusters()
        return find_one(clusters.items, search, 'kubernetes cluster')
