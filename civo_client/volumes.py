from .kubernetes import KubernetesAPI
from .models import (
    SimpleResponse,
    Volume,
    VolumeAttachConfig,
    VolumeConfig,
    VolumeResult,
    VolumeSnapshot,
    VolumeSnapshotConfig,
    decode,
)
from .transport import Transport, api_call
from .utils import find_one


class VolumesAPI:
    def __init__(self, transport: Transport, region: str, kubernetes: KubernetesAPI):
        self.transport = transport
        self.region = region
        self.kubernetes = kubernetes

    @api_call('volume', 'list')
    async def list_volumes(self) -> list[Volume]:
        resp = await self.transport.get('/v2/volumes')
        return decode(list[Volume], resp)

    async def list_volumes_for_cluster(self, cluster_id: str) -> list[Volume]:
        cluster = await self.kubernetes.find_kubernetes_cluster(cluster_id)
        volumes = await self.list_volumes()
        return [vol for vol in volumes if vol.cluster_id and vol.cluster_id == cluster.id]

    async def list_dangling_volumes(self) -> list[Volume]:
        """
        volumes which have a cluster id set but that cluster doesn't exist anymore
        """
        clusters = await self.kubernetes.list_kubernetes_clusters()
        cluster_ids = {cluster.id for cluster in clusters.items}
        volumes = await self.list_volumes()
        return [vol for vol in volumes if vol.cluster_id and vol.cluster_id not in cluster_ids]

    @api_call('volume', 'get')
    async def get_volume(self, id: str) -> Volume:
        resp = await self.transport.get(f'/v2/volumes/{id}')
        return decode(Volume, resp)

    async def find_volume(self, search: str) -> Volume:
        return find_one(await self.list_volumes(), search, 'volume')

    @api_call('volume', 'create')
    async def new_volume(self, config: VolumeConfig) -> VolumeResult:
        """
        returns only id/name/result, fetch the volume for its full state
        """
        resp = await self.transport.post('/v2/volumes', config.for_region(self.region).to_body())
        return decode(VolumeResult, resp)

    @api_call('volume', 'resize')
    async def resize_volume(self, id: str, size_gb: int) -> SimpleResponse:
        resp = await self.transport.put(
            f'/v2/volumes/{id}/resize', {'size_gb': size_gb, 'region': self.region}
        )
        return decode(SimpleResponse, resp)

    @api_call('volume', 'attach')
    async def attach_volume(self, id: str, config: VolumeAttachConfig) -> SimpleResponse:
        resp = await self.transport.put(
            f'/v2/volumes/{id}/attach', config.for_region(self.region).to_body()
        )
        return decode(SimpleResponse, resp)

    @api_call('volume', 'detach')
    async def detach_volume(self, id: str) -> SimpleResponse:
        # detaches from whichever instance currently holds it
        resp = await self.transport.put(f'/v2/volumes/{id}/detach', {'region': self.region})
        return decode(SimpleResponse, resp)

    @api_call('volume', 'delete')
    async def delete_volume(self, id: str) -> SimpleResponse:
        resp = await self.transport.delete(f'/v2/volumes/{id}')
        return decode(SimpleResponse, resp)

    @api_call('volume', 'delete with snapshots')
    async def delete_volume_and_all_snapshots(self, id: str) -> SimpleResponse:
        resp = await self.transport.delete(f'/v2/volumes/{id}?delete_snapshot=true')
        return decode(SimpleResponse, resp)

    @api_call('volume snapshot', 'list')
    async def list_volume_snapshots(self, volume_id: str) -> list[VolumeSnapshot]:
        resp = await self.transport.get(f'/v2/volumes/{volume_id}/snapshots')
        return decode(list[VolumeSnapshot], resp)

    @api_call('volume snapshot', 'get')
    async def get_volume_snapshot(self, volume_id: str, snapshot_id: str) -> VolumeSnapshot:
        resp = await self.transport.get(f'/v2/volumes/{volume_id}/snapshots/{snapshot_id}')
        return decode(VolumeSnapshot, resp)

    @api_call('volume snapshot', 'create')
    async def create_volume_snapshot(
        self, volume_id: str, config: VolumeSnapshotConfig
    ) -> VolumeSnapshot:
        resp = await self.transport.post(
            f'/v2/volumes/{volume_id}/snapshots', config.for_region(self.region).to_body()
        )
        return decode(VolumeSnapshot, resp)

    @api_call('volume snapshot', 'delete')
    async def delete_volume_snapshot(self, volume_id: str, snapshot_id: str) -> SimpleResponse:
        resp = await self.transport.delete(f'/v2/volumes/{volume_id}/snapshots/{snapshot_id}')
        return decode(SimpleResponse, resp)
